"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import Board


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(
        board: Board,
        shuffles: int | None = None,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after *shuffles* random slides.

        The walk never undoes its previous slide unless it has no other
        choice, so short walks still wander away from the start.
        """
        rng = rng or random.Random()
        if shuffles is None:
            shuffles = board.size * board.size * 100
        prev: Board | None = None

        for _ in range(shuffles):
            neighbors = list(board.neighbors())
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int,
        shuffles: int | None = None,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable*, not yet solved board of the given size."""
        if shuffles is not None and shuffles < 1:
            raise ValueError(f"Need at least one shuffle, got {shuffles}.")
        rng = rng or random.Random()
        board = GameGenerator.scramble(GameGenerator.solved(size), shuffles, rng)

        # Some walks always return to the goal (e.g. 2×2 with a multiple of
        # 12 slides); one more slide from the goal never lands on it.
        if board.is_goal():
            board = rng.choice(list(board.neighbors()))
        return board
