"""Search-tree nodes and the values a solve hands back to callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tilesearch.models.board import Board, Direction


class Algorithm(StrEnum):
    ITERATIVE_DEEPENING = "iterative-deepening"
    GREEDY = "greedy"
    WEIGHTED_A_STAR = "a-star"
    BIDIRECTIONAL = "bidirectional"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Algorithm.ITERATIVE_DEEPENING: "IDA*",
    Algorithm.GREEDY: "Greedy-Best",
    Algorithm.WEIGHTED_A_STAR: "A*",
    Algorithm.BIDIRECTIONAL: "Bidirectional A*",
}


class SearchStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    EXHAUSTED = "exhausted"
    ITERATION_LIMIT = "iteration-limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"


@dataclass(slots=True, eq=False)
class SearchNode:
    """One board in a search tree.

    ``parent`` is a back-link used only to rebuild the path; ``direction``
    says which way the blank moved to get here from the parent.
    """

    board: Board
    blank_index: int
    direction: Direction = Direction.START
    parent: SearchNode | None = None
    g: int = 0
    h: int = 0

    @classmethod
    def root(cls, board: Board, h: int = 0) -> SearchNode:
        return cls(board=board, blank_index=board.blank_index, h=h)

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def key(self) -> tuple[int, ...]:
        return self.board.tiles


@dataclass(frozen=True)
class PathStep:
    """A frozen copy of one node on a solution path, without the parent link."""

    board: Board
    blank_index: int
    direction: Direction
    g: int
    h: int

    @classmethod
    def of(cls, node: SearchNode) -> PathStep:
        return cls(node.board, node.blank_index, node.direction, node.g, node.h)


@dataclass(frozen=True)
class SolverResult:
    path: tuple[PathStep, ...]
    steps: int
    nodes_explored: int
    algorithm_name: str
    time_taken: float

    @property
    def moves(self) -> list[Direction]:
        """Blank moves from start to goal, without the root."""
        return [node.direction for node in self.path[1:]]


@dataclass(frozen=True)
class SearchOutcome:
    """What a strategy run ended with.

    ``result`` is set only when ``status`` is :attr:`SearchStatus.SOLVED`.
    """

    status: SearchStatus
    algorithm_name: str
    nodes_explored: int = 0
    time_taken: float = 0.0
    result: SolverResult | None = None

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED
