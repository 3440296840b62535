"""Applies blank moves to boards and replays move sequences."""

from __future__ import annotations

from collections.abc import Iterable

from tilesearch.models.board import GRID_SIZE, Board, Direction, col, row


def apply_move(board: Board, direction: Direction) -> Board | None:
    """Move the blank one cell in *direction*.

    Returns the new board, or ``None`` if the blank would leave the grid.
    """
    if direction is Direction.START:
        return board
    bi = board.blank_index
    dr, dc = direction.offset
    tr, tc = row(bi) + dr, col(bi) + dc
    if not (0 <= tr < GRID_SIZE and 0 <= tc < GRID_SIZE):
        return None
    return board.swap(bi, tr * GRID_SIZE + tc)


class GamePlay:
    """Tracks a board as moves are applied toward a goal."""

    def __init__(self, board: Board, goal: Board) -> None:
        self.board = board
        self.goal = goal
        self.moves: int = 0

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank one cell in *direction*.

        E.g. ``Direction.UP`` swaps the blank with the tile above it.
        Returns True if the move was valid.
        """
        if direction is Direction.START:
            return False
        moved = apply_move(self.board, direction)
        if moved is None:
            return False
        self.board = moved
        self.moves += 1
        return True

    def replay(self, directions: Iterable[Direction]) -> bool:
        """Apply *directions* in order; stop at the first invalid one."""
        return all(self.move(d) for d in directions)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board == self.goal
