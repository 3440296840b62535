"""Manhattan distance and linear conflict against an arbitrary goal.

Both heuristics are measured relative to whatever goal board is supplied;
nothing here assumes ascending order.
"""

from __future__ import annotations

from tilesearch.models.board import CELL_COUNT, GRID_SIZE, Board


class GoalHeuristic:
    """Scores tile tuples against one fixed goal.

    The goal row/column of every tile is looked up once here so that the
    search loops can score raw ``tuple`` boards cheaply.
    """

    __slots__ = ("goal", "_goal_row", "_goal_col")

    def __init__(self, goal: Board) -> None:
        self.goal = goal
        goal_row = [0] * CELL_COUNT
        goal_col = [0] * CELL_COUNT
        for idx, tile in enumerate(goal.tiles):
            goal_row[tile], goal_col[tile] = divmod(idx, GRID_SIZE)
        self._goal_row = goal_row
        self._goal_col = goal_col

    def manhattan(self, tiles: tuple[int, ...]) -> int:
        goal_row = self._goal_row
        goal_col = self._goal_col
        dist = 0
        for idx, tile in enumerate(tiles):
            if tile == 0:
                continue
            r, c = divmod(idx, GRID_SIZE)
            dist += abs(r - goal_row[tile]) + abs(c - goal_col[tile])
        return dist

    def linear_conflict(self, tiles: tuple[int, ...]) -> int:
        """2 per pair of tiles sharing their goal line but in inverted order."""
        goal_row = self._goal_row
        goal_col = self._goal_col
        conflict = 0
        n = GRID_SIZE

        # Row conflicts
        for r in range(n):
            cols = [
                goal_col[t]
                for t in tiles[r * n : (r + 1) * n]
                if t != 0 and goal_row[t] == r
            ]
            for i in range(len(cols)):
                for j in range(i + 1, len(cols)):
                    if cols[i] > cols[j]:
                        conflict += 2

        # Column conflicts
        for c in range(n):
            rows = [
                goal_row[t]
                for t in tiles[c::n]
                if t != 0 and goal_col[t] == c
            ]
            for i in range(len(rows)):
                for j in range(i + 1, len(rows)):
                    if rows[i] > rows[j]:
                        conflict += 2

        return conflict

    def score(self, tiles: tuple[int, ...]) -> int:
        return self.manhattan(tiles) + self.linear_conflict(tiles)


def manhattan(board: Board, goal: Board) -> int:
    return GoalHeuristic(goal).manhattan(board.tiles)


def linear_conflict(board: Board, goal: Board) -> int:
    return GoalHeuristic(goal).linear_conflict(board.tiles)


def complexity_score(board: Board, goal: Board) -> int:
    """Manhattan distance plus linear conflict; 0 exactly when board == goal.

    This is the single heuristic used by every strategy and by the
    difficulty rating.
    """
    return GoalHeuristic(goal).score(board.tiles)
