"""Turns terminal search nodes into caller-facing results."""

from __future__ import annotations

import time

from tilesearch.models.node import PathStep, SearchNode, SolverResult


def trace_path(node: SearchNode) -> list[SearchNode]:
    """Walk parent links back to the root and return root-first order."""
    path: list[SearchNode] = []
    current: SearchNode | None = node
    while current is not None:
        path.append(current)
        current = current.parent
    path.reverse()
    return path


def join_paths(forward: SearchNode, backward: SearchNode) -> list[SearchNode]:
    """Join two half-paths that meet on the same board.

    *forward* ends a chain rooted at the start board and *backward* ends a
    chain rooted at the goal board.  The backward chain is walked from the
    meeting node toward its root.  Each step is re-emitted in forward
    sense, so the direction is flipped.  ``g`` is renumbered along the
    joined path.
    """
    joined = trace_path(forward)
    step = backward
    while step.parent is not None:
        prev = step.parent
        joined.append(
            SearchNode(
                board=prev.board,
                blank_index=prev.blank_index,
                direction=step.direction.opposite,
                h=prev.h,
            )
        )
        step = prev

    renumbered: list[SearchNode] = []
    parent: SearchNode | None = None
    for g, node in enumerate(joined):
        copy = SearchNode(
            board=node.board,
            blank_index=node.blank_index,
            direction=node.direction,
            parent=parent,
            g=g,
            h=node.h,
        )
        renumbered.append(copy)
        parent = copy
    return renumbered


def build_result(
    path: list[SearchNode],
    nodes_explored: int,
    algorithm_name: str,
    started: float,
) -> SolverResult:
    """Package *path*; *started* is a :func:`time.perf_counter` reading.

    The nodes are copied into frozen :class:`PathStep` records, so the
    result does not share mutable state with the search tree.
    """
    return SolverResult(
        path=tuple(PathStep.of(node) for node in path),
        steps=len(path) - 1,
        nodes_explored=nodes_explored,
        algorithm_name=algorithm_name,
        time_taken=time.perf_counter() - started,
    )
