"""Preset goal patterns."""

from __future__ import annotations

from dataclasses import dataclass

from tilesearch.models.board import Board

CLASSIC_GOAL = Board.from_flat(
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 0]
)


@dataclass(frozen=True)
class Preset:
    slug: str
    name: str
    goal: Board


PRESETS: tuple[Preset, ...] = (
    Preset("classic", "Classic Order", CLASSIC_GOAL),
    # Each row a single colour: odd tiles, then even tiles.
    Preset(
        "stripes",
        "Horizontal Stripes",
        Board.from_flat([1, 3, 5, 7, 2, 4, 6, 8, 9, 11, 13, 15, 10, 12, 14, 0]),
    ),
    Preset(
        "checkerboard",
        "Checkerboard Parity",
        Board.from_flat([1, 2, 3, 4, 6, 5, 8, 7, 9, 10, 11, 12, 14, 13, 15, 0]),
    ),
    Preset(
        "column-swap",
        "Column Swap",
        Board.from_flat([2, 1, 4, 3, 6, 5, 8, 7, 10, 9, 12, 11, 0, 13, 14, 15]),
    ),
    Preset(
        "spiral",
        "Spiral Pattern",
        Board.from_flat([1, 2, 3, 4, 12, 13, 14, 5, 11, 0, 15, 6, 10, 9, 8, 7]),
    ),
    Preset(
        "inverted",
        "Inverted Order",
        Board.from_flat([15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 1, 2, 0]),
    ),
)

_BY_SLUG = {p.slug: p for p in PRESETS}


def get_preset(slug: str) -> Preset:
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise KeyError(
            f"Unknown preset {slug!r}; choose from {', '.join(_BY_SLUG)}."
        ) from None
