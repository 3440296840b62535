"""Board model for the 4×4 sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

GRID_SIZE = 4
CELL_COUNT = GRID_SIZE * GRID_SIZE


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of 0..15."""


class Direction(StrEnum):
    """Which way the *blank* moved to reach a board.

    ``START`` marks a root board that was not produced by a move.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    START = "start"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> tuple[int, int]:
        """(row, col) delta applied to the blank."""
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.START: Direction.START,
}

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.START: (0, 0),
}

# Generation order for successors; IDA* sorts on top of it.
MOVE_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


# -- index arithmetic ---------------------------------------------------------


def row(index: int) -> int:
    return index // GRID_SIZE


def col(index: int) -> int:
    return index % GRID_SIZE


@dataclass(frozen=True)
class Board:
    """An immutable 4×4 board stored as a flat row-major tuple.

    0 represents the blank.  Use :meth:`from_flat` to build a board from
    untrusted input; it checks that the tiles are a permutation of 0..15.
    """

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        _validate(tiles)
        object.__setattr__(self, "tiles", tiles)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0])
        """
        return cls(tuple(flat))

    @classmethod
    def _trusted(cls, tiles: tuple[int, ...]) -> Board:
        """Wrap *tiles* without validation (used for boards derived by swaps)."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    def rows(self) -> list[tuple[int, ...]]:
        return [
            self.tiles[r * GRID_SIZE : (r + 1) * GRID_SIZE] for r in range(GRID_SIZE)
        ]

    def is_tile_correct(self, index: int, goal: Board) -> bool:
        """Check if the tile at *index* already sits where *goal* wants it."""
        return self.tiles[index] == goal.tiles[index]

    def swap(self, i: int, j: int) -> Board:
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board._trusted(tuple(tiles))

    def __str__(self) -> str:
        return ",".join(str(v) for v in self.tiles)


def _validate(tiles: tuple[int, ...]) -> None:
    if len(tiles) != CELL_COUNT:
        raise InvalidBoardError(
            f"Expected {CELL_COUNT} tiles for a {GRID_SIZE}×{GRID_SIZE} board, "
            f"got {len(tiles)}."
        )
    for v in tiles:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidBoardError(f"Tile {v!r} is not an integer.")
    if sorted(tiles) != list(range(CELL_COUNT)):
        missing = sorted(set(range(CELL_COUNT)) - set(tiles))
        raise InvalidBoardError(
            f"Tiles must be a permutation of 0..{CELL_COUNT - 1}; "
            f"missing {missing}."
        )


def blank_index(board: Board) -> int:
    return board.blank_index


def swap(board: Board, i: int, j: int) -> Board:
    """Return a new board with positions *i* and *j* exchanged."""
    return board.swap(i, j)


def as_board(value: Board | Iterable[int]) -> Board:
    """Coerce a raw tile sequence to a validated :class:`Board`."""
    if isinstance(value, Board):
        return value
    return Board.from_flat(value)
