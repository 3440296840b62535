"""Entry point for solving 4×4 sliding puzzles."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from tilesearch.config import DEFAULT_SETTINGS, SolverSettings
from tilesearch.engine.gamesolver import parity
from tilesearch.engine.gamesolver.deadline import Deadline
from tilesearch.engine.gamesolver.strategies import STRATEGIES
from tilesearch.engine.heuristics import complexity_score
from tilesearch.models.board import Board, Direction, as_board
from tilesearch.models.node import (
    Algorithm,
    SearchOutcome,
    SearchStatus,
    SolverResult,
)
from tilesearch.models.presets import CLASSIC_GOAL

logger = logging.getLogger(__name__)

BoardLike = Board | Iterable[int]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def run(
        start: BoardLike,
        algorithm: Algorithm | str = Algorithm.ITERATIVE_DEEPENING,
        goal: BoardLike = CLASSIC_GOAL,
        *,
        settings: SolverSettings = DEFAULT_SETTINGS,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SearchOutcome:
        """Solve *start* toward *goal* and report how the search ended.

        Unsolvable pairs are rejected by the parity check before any node
        is expanded.  *timeout* (seconds) and *cancel_event* let a host
        stop a long search early.

        Raises :class:`~tilesearch.models.board.InvalidBoardError` if either
        board is not a permutation of 0..15.
        """
        start = as_board(start)
        goal = as_board(goal)
        algorithm = Algorithm(algorithm)

        if not parity.is_solvable(start, goal):
            logger.info("Rejected unsolvable board %s -> %s", start, goal)
            return SearchOutcome(
                status=SearchStatus.UNSOLVABLE,
                algorithm_name=algorithm.display_name,
            )

        strategy = STRATEGIES[algorithm](settings)
        outcome = strategy.run(start, goal, Deadline(timeout, cancel_event))
        if outcome.result is not None:
            logger.info(
                "%s solved in %d steps (%d nodes, %.3fs)",
                outcome.algorithm_name,
                outcome.result.steps,
                outcome.nodes_explored,
                outcome.time_taken,
            )
        else:
            logger.info(
                "%s gave up: %s after %d nodes",
                outcome.algorithm_name,
                outcome.status,
                outcome.nodes_explored,
            )
        return outcome

    @staticmethod
    def solve(
        start: BoardLike,
        algorithm: Algorithm | str = Algorithm.ITERATIVE_DEEPENING,
        goal: BoardLike = CLASSIC_GOAL,
        *,
        settings: SolverSettings = DEFAULT_SETTINGS,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SolverResult | None:
        """Return a path from *start* to *goal*, or ``None`` if none was found.

        Use :meth:`run` to tell an unsolvable board apart from a search that
        ran out of budget.
        """
        outcome = Solver.run(
            start,
            algorithm,
            goal,
            settings=settings,
            timeout=timeout,
            cancel_event=cancel_event,
        )
        return outcome.result

    @staticmethod
    def hint(
        board: BoardLike,
        goal: BoardLike = CLASSIC_GOAL,
        algorithm: Algorithm | str = Algorithm.ITERATIVE_DEEPENING,
        *,
        settings: SolverSettings = DEFAULT_SETTINGS,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Direction | None:
        """Return the next blank move, or ``None`` if solved / no path found."""
        result = Solver.solve(
            board,
            algorithm,
            goal,
            settings=settings,
            timeout=timeout,
            cancel_event=cancel_event,
        )
        if result is None or result.steps == 0:
            return None
        return result.path[1].direction

    @staticmethod
    def is_solvable(board: BoardLike, goal: BoardLike = CLASSIC_GOAL) -> bool:
        """Return True if *board* can reach *goal*."""
        return parity.is_solvable(as_board(board), as_board(goal))

    @staticmethod
    def complexity_score(board: BoardLike, goal: BoardLike = CLASSIC_GOAL) -> int:
        """Difficulty rating: Manhattan distance plus linear conflict."""
        return complexity_score(as_board(board), as_board(goal))
