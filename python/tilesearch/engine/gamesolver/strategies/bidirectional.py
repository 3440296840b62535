"""Bidirectional A*: one search from the start, one from the goal.

Each side is a :class:`SearchContext`.  After a side closes a node it
looks the board up in the other side's closed map; a hit is a meeting
point whose cost is the sum of both g values.
"""

from __future__ import annotations

import logging
import math
import time

from tilesearch.engine.gameplay.successors import neighbors
from tilesearch.engine.gamesolver.assembler import join_paths
from tilesearch.engine.gamesolver.deadline import Deadline
from tilesearch.engine.gamesolver.frontier import MinHeap
from tilesearch.engine.gamesolver.strategies.base import SearchStrategy
from tilesearch.engine.heuristics import GoalHeuristic
from tilesearch.models.board import Board
from tilesearch.models.node import Algorithm, SearchNode, SearchOutcome, SearchStatus

logger = logging.getLogger(__name__)


class Meeting:
    """Best meeting point found so far."""

    __slots__ = ("cost", "forward", "backward")

    def __init__(self) -> None:
        self.cost: float = math.inf
        self.forward: SearchNode | None = None
        self.backward: SearchNode | None = None

    @property
    def found(self) -> bool:
        return self.forward is not None

    def offer(self, forward: SearchNode, backward: SearchNode) -> None:
        cost = forward.g + backward.g
        if cost < self.cost:
            self.cost = cost
            self.forward = forward
            self.backward = backward


class SearchContext:
    """A unidirectional A* rooted at *root* and aimed at *target*."""

    def __init__(self, root: Board, target: Board, forward: bool) -> None:
        self.forward = forward
        self.heuristic = GoalHeuristic(target)
        root_node = SearchNode.root(root, self.heuristic.score(root.tiles))
        self.frontier: MinHeap[SearchNode] = MinHeap()
        self.frontier.push(root_node, root_node.f)
        self.closed: dict[tuple[int, ...], SearchNode] = {}
        self.best_g: dict[tuple[int, ...], int] = {root.tiles: 0}
        self.finished = False

    @property
    def active(self) -> bool:
        return not self.finished and bool(self.frontier)

    def expand_one(self, other: SearchContext, meeting: Meeting) -> None:
        node = self.frontier.pop()
        key = node.key
        if key in self.closed:
            return
        self.closed[key] = node

        met = other.closed.get(key)
        if met is not None:
            if self.forward:
                meeting.offer(node, met)
            else:
                meeting.offer(met, node)

        # The frontier pops in f order, so nothing left here can beat the
        # best meeting once f reaches it.
        if meeting.found and node.f >= meeting.cost:
            self.finished = True
            self.frontier.clear()
            return

        for child in neighbors(node):
            ck = child.key
            if ck in self.closed:
                continue
            known = self.best_g.get(ck)
            if known is None or child.g < known:
                child.h = self.heuristic.score(ck)
                self.best_g[ck] = child.g
                self.frontier.push(child, child.f)


class BidirectionalSearch(SearchStrategy):
    algorithm = Algorithm.BIDIRECTIONAL

    def run(self, start: Board, goal: Board, deadline: Deadline) -> SearchOutcome:
        started = time.perf_counter()
        cap = self.settings.bidirectional_iteration_cap
        forward = SearchContext(start, goal, forward=True)
        backward = SearchContext(goal, start, forward=False)
        meeting = Meeting()
        nodes = 0

        while forward.active or backward.active:
            if nodes >= cap:
                logger.info("%s hit its cap of %d expansions", self.name, cap)
                break
            stop = deadline.check()
            if stop is not None:
                return self._stopped(stop, nodes, started)

            for side, other in ((forward, backward), (backward, forward)):
                if side.active and nodes < cap:
                    nodes += 1
                    side.expand_one(other, meeting)

        if meeting.found:
            logger.debug(
                "Frontiers met at cost %s (forward g=%d, backward g=%d)",
                meeting.cost,
                meeting.forward.g,
                meeting.backward.g,
            )
            path = join_paths(meeting.forward, meeting.backward)
            return self._solved(path, nodes, started)
        if nodes >= cap:
            return self._stopped(SearchStatus.ITERATION_LIMIT, nodes, started)
        return self._stopped(SearchStatus.EXHAUSTED, nodes, started)
