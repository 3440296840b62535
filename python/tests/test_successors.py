"""Successor generator and move replay."""

from __future__ import annotations

import pytest

from tilesearch.engine.gamegenerator import GameGenerator
from tilesearch.engine.gameplay import GamePlay, apply_move, neighbors
from tilesearch.models import CLASSIC_GOAL, Board, Direction, SearchNode


def _with_blank_at(index: int) -> Board:
    return CLASSIC_GOAL.swap(CLASSIC_GOAL.blank_index, index)


@pytest.mark.parametrize(
    ("blank", "expected"),
    [
        (0, [Direction.DOWN, Direction.RIGHT]),
        (3, [Direction.DOWN, Direction.LEFT]),
        (5, [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]),
        (12, [Direction.UP, Direction.RIGHT]),
        (13, [Direction.UP, Direction.LEFT, Direction.RIGHT]),
        (15, [Direction.UP, Direction.LEFT]),
    ],
)
def test_moves_stay_on_grid_in_fixed_order(blank: int, expected: list[Direction]) -> None:
    node = SearchNode.root(_with_blank_at(blank))
    assert [child.direction for child in neighbors(node)] == expected


def test_children_link_back_and_count_cost() -> None:
    parent = SearchNode.root(_with_blank_at(5), h=9)
    parent.g = 4
    for child in neighbors(parent):
        assert child.parent is parent
        assert child.g == 5
        assert child.h == 0
        assert child.board.tiles[child.blank_index] == 0
        # Exactly the blank and one neighbour changed places.
        changed = [
            i for i in range(16) if child.board.tiles[i] != parent.board.tiles[i]
        ]
        assert sorted(changed) == sorted([parent.blank_index, child.blank_index])
    assert parent.board == _with_blank_at(5)


@pytest.mark.parametrize("seed", range(5))
def test_reversing_a_move_restores_the_board(seed: int) -> None:
    node = SearchNode.root(GameGenerator.generate(CLASSIC_GOAL, moves=30, seed=seed))
    for child in neighbors(node):
        assert apply_move(child.board, child.direction.opposite) == node.board


def test_apply_move_rejects_leaving_the_grid() -> None:
    corner = _with_blank_at(0)
    assert apply_move(corner, Direction.UP) is None
    assert apply_move(corner, Direction.LEFT) is None
    assert apply_move(corner, Direction.START) == corner


def test_gameplay_replays_blank_moves() -> None:
    start = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 0, 11, 13, 14, 15, 12])
    game = GamePlay(start, CLASSIC_GOAL)
    assert not game.is_won
    assert not game.move(Direction.START)
    assert game.replay([Direction.RIGHT, Direction.DOWN])
    assert game.is_won
    assert game.moves == 2
    assert not game.move(Direction.DOWN)
