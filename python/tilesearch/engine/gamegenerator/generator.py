"""Generates boards that are solvable relative to a chosen goal."""

from __future__ import annotations

import random

from tilesearch.engine.gameplay.successors import successor_tiles
from tilesearch.models.board import Board
from tilesearch.models.presets import CLASSIC_GOAL


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the goal."""

    @staticmethod
    def solved() -> Board:
        """Return the classic goal (tiles in order, blank bottom-right)."""
        return CLASSIC_GOAL

    @staticmethod
    def scramble(goal: Board, moves: int, rng: random.Random) -> Board:
        """Make *moves* random blank moves from *goal*, never undoing the last one."""
        tiles = goal.tiles
        blank = goal.blank_index
        prev_blank: int | None = None

        for _ in range(moves):
            options = successor_tiles(tiles, blank)
            if len(options) > 1:
                options = [o for o in options if o[1] != prev_blank]
            _, target, tiles = rng.choice(options)
            prev_blank, blank = blank, target

        return Board._trusted(tiles)

    @staticmethod
    def generate(
        goal: Board = CLASSIC_GOAL, moves: int = 80, seed: int | None = None
    ) -> Board:
        """Return a random board solvable toward *goal* that differs from it."""
        if moves < 1:
            raise ValueError("moves must be at least 1.")
        rng = random.Random(seed)
        while True:
            board = GameGenerator.scramble(goal, moves, rng)
            if board != goal:
                return board
