"""Iterative-deepening A*.

The only strategy that returns a shortest path: it uses the unweighted
heuristic and re-runs a depth-first pass with the threshold raised to the
smallest f rejected by the previous pass.
"""

from __future__ import annotations

import logging
import math
import time

from tilesearch.engine.gameplay.successors import neighbors
from tilesearch.engine.gamesolver.assembler import trace_path
from tilesearch.engine.gamesolver.deadline import Deadline
from tilesearch.engine.gamesolver.strategies.base import SearchStrategy
from tilesearch.engine.heuristics import GoalHeuristic
from tilesearch.models.board import Board
from tilesearch.models.node import Algorithm, SearchNode, SearchOutcome, SearchStatus

logger = logging.getLogger(__name__)


class IterativeDeepeningSearch(SearchStrategy):
    algorithm = Algorithm.ITERATIVE_DEEPENING

    def run(self, start: Board, goal: Board, deadline: Deadline) -> SearchOutcome:
        started = time.perf_counter()
        deadline = deadline.limited(self.settings.ida_time_budget)
        interval = self.settings.deadline_check_interval
        heuristic = GoalHeuristic(goal)

        nodes = 0
        stopped: SearchStatus | None = None

        def search(node: SearchNode, threshold: float) -> tuple[float, SearchNode | None]:
            """Return (smallest rejected f, solution node or None)."""
            nonlocal nodes, stopped
            nodes += 1
            if nodes % interval == 0:
                stopped = deadline.check()
                if stopped is not None:
                    return math.inf, None

            f = node.g + node.h
            if f > threshold:
                return f, None
            if node.h == 0:
                return f, node

            children = neighbors(node)
            for child in children:
                child.h = heuristic.score(child.key)
            children.sort(key=lambda c: c.h)

            # Skip the move that undoes the one that led here.
            back = node.parent.key if node.parent is not None else None
            minimum = math.inf
            for child in children:
                if child.key == back:
                    continue
                t, found = search(child, threshold)
                if found is not None:
                    return t, found
                if stopped is not None:
                    return math.inf, None
                if t < minimum:
                    minimum = t
            return minimum, None

        root = SearchNode.root(start, heuristic.score(start.tiles))
        threshold: float = root.h
        while True:
            stop = deadline.check()
            if stop is not None:
                logger.info("IDA* stopped (%s) at threshold %s", stop, threshold)
                return self._stopped(stop, nodes, started)

            t, found = search(root, threshold)
            if found is not None:
                return self._solved(trace_path(found), nodes, started)
            if stopped is not None:
                logger.info("IDA* stopped (%s) at threshold %s", stopped, threshold)
                return self._stopped(stopped, nodes, started)
            if t == math.inf:
                return self._stopped(SearchStatus.EXHAUSTED, nodes, started)

            logger.debug(
                "IDA* threshold %s -> %s after %d nodes", threshold, t, nodes
            )
            threshold = t
