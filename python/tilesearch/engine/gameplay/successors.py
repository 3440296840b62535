"""Legal blank moves from a search node."""

from __future__ import annotations

from tilesearch.models.board import (
    CELL_COUNT,
    GRID_SIZE,
    MOVE_ORDER,
    Board,
    Direction,
)
from tilesearch.models.node import SearchNode


def _build_moves() -> tuple[tuple[tuple[Direction, int], ...], ...]:
    table = []
    for i in range(CELL_COUNT):
        r, c = divmod(i, GRID_SIZE)
        moves = []
        for direction in MOVE_ORDER:
            dr, dc = direction.offset
            nr, nc = r + dr, c + dc
            if 0 <= nr < GRID_SIZE and 0 <= nc < GRID_SIZE:
                moves.append((direction, nr * GRID_SIZE + nc))
        table.append(tuple(moves))
    return tuple(table)


# _MOVES[blank] -> ((direction, new_blank), ...) in UP, DOWN, LEFT, RIGHT order.
_MOVES = _build_moves()


def successor_tiles(
    tiles: tuple[int, ...], blank: int
) -> list[tuple[Direction, int, tuple[int, ...]]]:
    """Return ``(direction, new_blank, new_tiles)`` for each legal move."""
    out = []
    for direction, target in _MOVES[blank]:
        lst = list(tiles)
        lst[blank], lst[target] = lst[target], lst[blank]
        out.append((direction, target, tuple(lst)))
    return out


def neighbors(node: SearchNode) -> list[SearchNode]:
    """Children of *node*, one per legal blank move.

    ``h`` is left at 0; the calling strategy scores the children against
    its own goal.
    """
    g = node.g + 1
    return [
        SearchNode(
            board=Board._trusted(tiles),
            blank_index=target,
            direction=direction,
            parent=node,
            g=g,
        )
        for direction, target, tiles in successor_tiles(node.board.tiles, node.blank_index)
    ]
