"""Scramble generator."""

from __future__ import annotations

import random

import pytest

from tilesearch.engine.gamegenerator import GameGenerator
from tilesearch.engine.gamesolver.parity import is_solvable
from tilesearch.models import CLASSIC_GOAL, PRESETS


def test_solved_is_classic_goal() -> None:
    assert GameGenerator.solved() == CLASSIC_GOAL


@pytest.mark.parametrize("preset", PRESETS, ids=lambda p: p.slug)
def test_generated_boards_differ_and_are_solvable(preset) -> None:
    board = GameGenerator.generate(preset.goal, moves=35, seed=4)
    assert board != preset.goal
    assert is_solvable(board, preset.goal)


def test_seed_makes_generation_repeatable() -> None:
    a = GameGenerator.generate(moves=50, seed=123)
    b = GameGenerator.generate(moves=50, seed=123)
    assert a == b


def test_zero_move_scramble_is_the_goal() -> None:
    assert GameGenerator.scramble(CLASSIC_GOAL, 0, random.Random(0)) == CLASSIC_GOAL


def test_single_move_moves_blank_once() -> None:
    board = GameGenerator.generate(moves=1, seed=0)
    assert board.blank_index in (11, 14)


def test_rejects_non_positive_move_counts() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(moves=0)
