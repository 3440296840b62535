from tilesearch.engine.gamesolver.frontier import MinHeap
from tilesearch.engine.gamesolver.solver import Solver

__all__ = ["MinHeap", "Solver"]
