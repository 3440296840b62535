"""Sliding-tile puzzle search engine for the 4×4 board."""

from tilesearch.engine.gamesolver import Solver
from tilesearch.models import Algorithm, Board, Direction, SearchStatus

__all__ = ["Algorithm", "Board", "Direction", "SearchStatus", "Solver"]
