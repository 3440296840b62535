"""Parses board arguments typed on the command line."""

from __future__ import annotations

import re

from tilesearch.models.board import Board, InvalidBoardError
from tilesearch.models.presets import get_preset

_SEPARATORS = re.compile(r"[\s,;]+")


def parse_board(text: str) -> Board:
    """Parse 16 comma- or space-separated integers into a :class:`Board`.

    Example::

        parse_board("1,2,3,4 5,6,7,8 9,10,11,12 13,14,0,15")
    """
    parts = [p for p in _SEPARATORS.split(text.strip()) if p]
    values: list[int] = []
    for p in parts:
        try:
            values.append(int(p))
        except ValueError:
            raise InvalidBoardError(f"{p!r} is not a tile number.") from None
    return Board.from_flat(values)


def resolve_goal(goal: str | None, preset: str | None) -> Board:
    """Pick the goal from an explicit board, a preset slug, or the default."""
    if goal is not None and preset is not None:
        raise ValueError("Pass either a goal board or a preset, not both.")
    if goal is not None:
        return parse_board(goal)
    return get_preset(preset or "classic").goal
