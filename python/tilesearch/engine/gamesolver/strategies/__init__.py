from tilesearch.engine.gamesolver.strategies.base import SearchStrategy
from tilesearch.engine.gamesolver.strategies.best_first import (
    BestFirstSearch,
    GreedySearch,
    WeightedAStarSearch,
)
from tilesearch.engine.gamesolver.strategies.bidirectional import (
    BidirectionalSearch,
    SearchContext,
)
from tilesearch.engine.gamesolver.strategies.ida_star import IterativeDeepeningSearch
from tilesearch.models.node import Algorithm

STRATEGIES: dict[Algorithm, type[SearchStrategy]] = {
    Algorithm.ITERATIVE_DEEPENING: IterativeDeepeningSearch,
    Algorithm.GREEDY: GreedySearch,
    Algorithm.WEIGHTED_A_STAR: WeightedAStarSearch,
    Algorithm.BIDIRECTIONAL: BidirectionalSearch,
}

__all__ = [
    "BestFirstSearch",
    "BidirectionalSearch",
    "GreedySearch",
    "IterativeDeepeningSearch",
    "STRATEGIES",
    "SearchContext",
    "SearchStrategy",
    "WeightedAStarSearch",
]
