"""Shared shape of every search strategy."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import ClassVar

from tilesearch.config import DEFAULT_SETTINGS, SolverSettings
from tilesearch.engine.gamesolver.assembler import build_result
from tilesearch.engine.gamesolver.deadline import Deadline
from tilesearch.models.board import Board
from tilesearch.models.node import Algorithm, SearchNode, SearchOutcome, SearchStatus


class SearchStrategy(ABC):
    """A search from *start* to *goal*.

    Instances hold only settings, so one instance may serve many solves;
    all per-run state lives inside :meth:`run`.
    """

    algorithm: ClassVar[Algorithm]

    def __init__(self, settings: SolverSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings

    @property
    def name(self) -> str:
        return self.algorithm.display_name

    @abstractmethod
    def run(self, start: Board, goal: Board, deadline: Deadline) -> SearchOutcome:
        """Search until the goal is reached or a bound stops the run."""

    # -- helpers --------------------------------------------------------------

    def _solved(
        self, path: list[SearchNode], nodes: int, started: float
    ) -> SearchOutcome:
        result = build_result(path, nodes, self.name, started)
        return SearchOutcome(
            status=SearchStatus.SOLVED,
            algorithm_name=self.name,
            nodes_explored=nodes,
            time_taken=result.time_taken,
            result=result,
        )

    def _stopped(
        self, status: SearchStatus, nodes: int, started: float
    ) -> SearchOutcome:
        return SearchOutcome(
            status=status,
            algorithm_name=self.name,
            nodes_explored=nodes,
            time_taken=time.perf_counter() - started,
        )
