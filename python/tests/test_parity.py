"""Solvability classifier — permutation parity against arbitrary goals."""

from __future__ import annotations

import random

import pytest

from tilesearch.engine.gamegenerator import GameGenerator
from tilesearch.engine.gamesolver.parity import (
    blank_row_from_bottom,
    inversions,
    is_solvable,
)
from tilesearch.models import CLASSIC_GOAL, PRESETS, Board, get_preset


def _random_board(rng: random.Random) -> Board:
    tiles = list(range(16))
    rng.shuffle(tiles)
    return Board.from_flat(tiles)


def _swap_first_two_tiles(board: Board) -> Board:
    i, j = [idx for idx, t in enumerate(board.tiles) if t != 0][:2]
    return board.swap(i, j)


def test_goal_has_no_inversions() -> None:
    assert inversions(CLASSIC_GOAL, CLASSIC_GOAL) == 0
    assert blank_row_from_bottom(CLASSIC_GOAL) == 1
    assert is_solvable(CLASSIC_GOAL, CLASSIC_GOAL)


def test_single_transposition_is_unsolvable() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0])
    assert inversions(board, CLASSIC_GOAL) == 1
    assert not is_solvable(board, CLASSIC_GOAL)


def test_swapping_first_pair_is_unsolvable() -> None:
    board = Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0])
    assert not is_solvable(board, CLASSIC_GOAL)


@pytest.mark.parametrize("seed", range(25))
def test_reachability_is_symmetric(seed: int) -> None:
    rng = random.Random(seed)
    a, b = _random_board(rng), _random_board(rng)
    assert is_solvable(a, b) == is_solvable(b, a)


@pytest.mark.parametrize("preset", PRESETS, ids=lambda p: p.slug)
def test_scrambles_are_solvable_toward_their_goal(preset) -> None:
    board = GameGenerator.generate(preset.goal, moves=60, seed=11)
    assert is_solvable(board, preset.goal)
    assert not is_solvable(_swap_first_two_tiles(board), preset.goal)


def test_inverted_goal_uses_its_own_parity() -> None:
    inverted = get_preset("inverted").goal
    start = GameGenerator.generate(inverted, moves=50, seed=5)
    assert is_solvable(start, inverted)
    assert not is_solvable(_swap_first_two_tiles(inverted), inverted)


def test_parity_is_relative_to_goal_not_ascending_order() -> None:
    checkerboard = get_preset("checkerboard").goal
    # Three swapped pairs: an odd permutation of the classic goal.
    assert not is_solvable(checkerboard, CLASSIC_GOAL)
    start = GameGenerator.generate(checkerboard, moves=50, seed=2)
    assert is_solvable(start, checkerboard)
    assert not is_solvable(start, CLASSIC_GOAL)


def test_blank_row_difference_matters() -> None:
    # Blank moved straight up one row: solvable.  Swapping two tiles on top
    # of that flips the parity.
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12])
    assert blank_row_from_bottom(board) == 2
    assert is_solvable(board, CLASSIC_GOAL)
    assert not is_solvable(board.swap(0, 1), CLASSIC_GOAL)
