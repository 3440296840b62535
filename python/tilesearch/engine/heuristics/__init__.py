from tilesearch.engine.heuristics.heuristics import (
    GoalHeuristic,
    complexity_score,
    linear_conflict,
    manhattan,
)

__all__ = ["GoalHeuristic", "complexity_score", "linear_conflict", "manhattan"]
