"""Board model — construction, validation and index arithmetic."""

from __future__ import annotations

import pytest

from tilesearch.models.board import (
    Board,
    Direction,
    InvalidBoardError,
    blank_index,
    col,
    row,
    swap,
)

CLASSIC = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0]


def test_from_flat_keeps_row_major_order() -> None:
    board = Board.from_flat(CLASSIC)
    assert board.tiles == tuple(CLASSIC)
    assert board.rows()[1] == (5, 6, 7, 8)
    assert str(board) == ",".join(str(v) for v in CLASSIC)


@pytest.mark.parametrize(
    "flat",
    [
        CLASSIC[:-1],
        CLASSIC + [16],
        [1, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 16, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, -1],
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15.0, 0],
        [True, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0],
    ],
    ids=["short", "long", "duplicate", "out-of-range", "negative", "float", "bool"],
)
def test_malformed_boards_fail_loudly(flat: list) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(flat)


def test_direct_construction_is_validated_too() -> None:
    with pytest.raises(InvalidBoardError):
        Board((0,) * 16)
    assert issubclass(InvalidBoardError, ValueError)


def test_index_arithmetic() -> None:
    assert (row(0), col(0)) == (0, 0)
    assert (row(6), col(6)) == (1, 2)
    assert (row(15), col(15)) == (3, 3)
    assert blank_index(Board.from_flat(CLASSIC)) == 15


def test_swap_returns_new_board_without_mutating() -> None:
    board = Board.from_flat(CLASSIC)
    swapped = swap(board, 14, 15)
    assert board.tiles == tuple(CLASSIC)
    assert swapped.tiles[14] == 0 and swapped.tiles[15] == 15
    assert swapped.blank_index == 14
    assert swapped != board


def test_boards_compare_and_hash_by_tiles() -> None:
    a = Board.from_flat(CLASSIC)
    b = Board.from_flat(list(CLASSIC))
    assert a == b
    assert len({a, b}) == 1


def test_direction_opposites() -> None:
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.START.opposite is Direction.START
    for d in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
        dr, dc = d.offset
        odr, odc = d.opposite.offset
        assert (dr + odr, dc + odc) == (0, 0)
