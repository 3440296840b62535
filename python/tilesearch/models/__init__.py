from tilesearch.models.board import Board, Direction, InvalidBoardError
from tilesearch.models.node import (
    Algorithm,
    PathStep,
    SearchNode,
    SearchOutcome,
    SearchStatus,
    SolverResult,
)
from tilesearch.models.presets import CLASSIC_GOAL, PRESETS, Preset, get_preset

__all__ = [
    "Algorithm",
    "Board",
    "CLASSIC_GOAL",
    "Direction",
    "InvalidBoardError",
    "PRESETS",
    "PathStep",
    "Preset",
    "SearchNode",
    "SearchOutcome",
    "SearchStatus",
    "SolverResult",
    "get_preset",
]
