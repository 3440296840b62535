"""Min-priority frontier shared by the best-first strategies."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Binary min-heap of ``(priority, value)`` entries.

    There is no decrease-key: strategies push a state again instead, and
    stale copies are dropped against the closed set when popped.  Entries
    with equal priority come out in insertion order.
    """

    __slots__ = ("_heap", "_counter")

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, value: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def pop(self) -> T:
        """Remove and return the value with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    @property
    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
