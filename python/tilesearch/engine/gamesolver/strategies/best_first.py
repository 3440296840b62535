"""Greedy best-first and weighted A*.

Both pop the lowest-priority node, stop on the goal, and otherwise close
the node and push its unclosed children.  They differ only in the
priority function and the expansion cap.
"""

from __future__ import annotations

import logging
import time
from abc import abstractmethod

from tilesearch.engine.gameplay.successors import neighbors
from tilesearch.engine.gamesolver.assembler import trace_path
from tilesearch.engine.gamesolver.deadline import Deadline
from tilesearch.engine.gamesolver.frontier import MinHeap
from tilesearch.engine.gamesolver.strategies.base import SearchStrategy
from tilesearch.engine.heuristics import GoalHeuristic
from tilesearch.models.board import Board
from tilesearch.models.node import Algorithm, SearchNode, SearchOutcome, SearchStatus

logger = logging.getLogger(__name__)


class BestFirstSearch(SearchStrategy):
    @property
    @abstractmethod
    def iteration_cap(self) -> int: ...

    @abstractmethod
    def priority(self, node: SearchNode) -> float: ...

    def run(self, start: Board, goal: Board, deadline: Deadline) -> SearchOutcome:
        started = time.perf_counter()
        heuristic = GoalHeuristic(goal)
        goal_key = goal.tiles
        cap = self.iteration_cap

        root = SearchNode.root(start, heuristic.score(start.tiles))
        frontier: MinHeap[SearchNode] = MinHeap()
        frontier.push(root, root.h)
        closed: set[tuple[int, ...]] = set()
        nodes = 0

        while frontier:
            if nodes >= cap:
                logger.info("%s hit its cap of %d expansions", self.name, cap)
                return self._stopped(SearchStatus.ITERATION_LIMIT, nodes, started)
            stop = deadline.check()
            if stop is not None:
                return self._stopped(stop, nodes, started)

            nodes += 1
            current = frontier.pop()
            key = current.key
            if key == goal_key:
                return self._solved(trace_path(current), nodes, started)
            if key in closed:
                continue
            closed.add(key)

            for child in neighbors(current):
                if child.key in closed:
                    continue
                child.h = heuristic.score(child.key)
                frontier.push(child, self.priority(child))

        return self._stopped(SearchStatus.EXHAUSTED, nodes, started)


class GreedySearch(BestFirstSearch):
    """Orders purely by heuristic; fast but paths are not shortest."""

    algorithm = Algorithm.GREEDY

    @property
    def iteration_cap(self) -> int:
        return self.settings.greedy_iteration_cap

    def priority(self, node: SearchNode) -> float:
        return node.h


class WeightedAStarSearch(BestFirstSearch):
    """A* with the heuristic inflated once the path grows long."""

    algorithm = Algorithm.WEIGHTED_A_STAR

    @property
    def iteration_cap(self) -> int:
        return self.settings.weighted_iteration_cap

    def priority(self, node: SearchNode) -> float:
        return node.g + node.h * self.settings.weight_for(node.g)
