"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from puzzle.models.board import Board, neighbors

logger = logging.getLogger(__name__)

DEFAULT_SHUFFLE_STEPS = 80


class GameGenerator:
    """Creates solvable puzzles by walking the hole away from the solved state.

    Every step is a legal slide, so the result is always reachable from the
    goal and no separate solvability check is needed.
    """

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, hole bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def generate(
        size: int,
        shuffle_steps: int = DEFAULT_SHUFFLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        ``shuffle_steps == 0`` returns the solved board unchanged. Pass a
        seeded ``random.Random`` as *rng* for a reproducible shuffle.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise ValueError(f"Grid size must be an integer >= 2, got {size!r}.")
        if (
            isinstance(shuffle_steps, bool)
            or not isinstance(shuffle_steps, int)
            or shuffle_steps < 0
        ):
            raise ValueError(
                f"Shuffle steps must be a non-negative integer, got {shuffle_steps!r}."
            )
        if rng is None:
            rng = random.Random()

        cells = list(Board.goal(size).cells)
        empty = size * size - 1
        for _ in range(shuffle_steps):
            # sorted() so a seeded rng always sees the same candidate order
            target = rng.choice(sorted(neighbors(empty, size)))
            cells[empty], cells[target] = cells[target], cells[empty]
            empty = target

        board = Board(size=size, cells=tuple(cells), empty_index=empty)
        logger.debug(
            "Generated %d×%d board after %d shuffle steps: %s",
            size, size, shuffle_steps, board.cells,
        )
        return board
