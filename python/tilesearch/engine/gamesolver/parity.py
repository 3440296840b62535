"""Reachability test based on permutation parity."""

from __future__ import annotations

from bisect import bisect_right, insort

from tilesearch.models.board import GRID_SIZE, Board, row


def inversions(board: Board, goal: Board) -> int:
    """Count out-of-order tile pairs, ordering tiles by their index in *goal*."""
    goal_index = {tile: idx for idx, tile in enumerate(goal.tiles)}
    inv = 0
    seen: list[int] = []
    for tile in board.tiles:
        if tile == 0:
            continue
        pos = goal_index[tile]
        inv += len(seen) - bisect_right(seen, pos)
        insort(seen, pos)
    return inv


def blank_row_from_bottom(board: Board) -> int:
    return GRID_SIZE - row(board.blank_index)


def is_solvable(board: Board, goal: Board) -> bool:
    """Return True if *goal* can be reached from *board* by blank moves.

    Every move is one transposition, and a vertical move also shifts the
    blank by one row, so the inversion parity must match the parity of the
    blank's row distance between the two boards.
    """
    row_gap = abs(blank_row_from_bottom(board) - blank_row_from_bottom(goal))
    return inversions(board, goal) % 2 == row_gap % 2
