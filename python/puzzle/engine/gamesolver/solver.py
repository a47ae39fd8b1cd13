"""Sliding puzzle solver."""

from __future__ import annotations

import heapq
import itertools
import logging
from bisect import bisect_left, insort

from puzzle.models.board import Board, goal_cells, neighbors

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXPANSIONS = 200_000


class SolverLimitError(RuntimeError):
    """Raised when a search exhausts its expansion budget."""


def _manhattan(cells: tuple[int, ...], size: int) -> int:
    total = 0
    for i, v in enumerate(cells):
        if v:
            r, c = divmod(i, size)
            gr, gc = divmod(v - 1, size)
            total += abs(r - gr) + abs(c - gc)
    return total


class Solver:
    """Stateless solver — all methods are static.

    Moves are expressed as target indices, the same form
    :func:`puzzle.engine.gameplay.apply_move` accepts.
    """

    @staticmethod
    def solve(board: Board, max_expansions: int = DEFAULT_MAX_EXPANSIONS) -> list[int]:
        """Return a shortest move sequence solving *board*, or ``[]`` if unsolvable.

        A* over cell arrangements with the Manhattan-distance heuristic.
        Practical for 3×3; larger boards may exceed *max_expansions*, which
        raises :class:`SolverLimitError`.
        """
        if board.is_solved():
            return []
        if not Solver.is_solvable(board):
            return []

        n = board.size
        goal = goal_cells(n)
        start = board.cells
        tie = itertools.count()
        frontier = [(_manhattan(start, n), next(tie), 0, start, board.empty_index)]
        came_from: dict[tuple[int, ...], tuple[tuple[int, ...], int] | None] = {start: None}
        best_g = {start: 0}
        expansions = 0

        while frontier:
            _, _, g, cells, empty = heapq.heappop(frontier)
            if cells == goal:
                path: list[int] = []
                node = cells
                while came_from[node] is not None:
                    prev, target = came_from[node]
                    path.append(target)
                    node = prev
                path.reverse()
                logger.debug("Solved in %d moves after %d expansions", len(path), expansions)
                return path
            if g > best_g[cells]:
                continue
            expansions += 1
            if expansions > max_expansions:
                raise SolverLimitError(
                    f"Search exceeded {max_expansions} expansions on a {n}×{n} board."
                )
            for target in neighbors(empty, n):
                nxt = list(cells)
                nxt[empty], nxt[target] = nxt[target], nxt[empty]
                nxt_t = tuple(nxt)
                if g + 1 < best_g.get(nxt_t, g + 2):
                    best_g[nxt_t] = g + 1
                    came_from[nxt_t] = (cells, target)
                    f = g + 1 + _manhattan(nxt_t, n)
                    heapq.heappush(frontier, (f, next(tie), g + 1, nxt_t, target))

        return []

    @staticmethod
    def hint(board: Board) -> int | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        try:
            moves = Solver.solve(board)
        except SolverLimitError:
            logger.info("No hint for %d×%d board: search budget exhausted", board.size, board.size)
            return None

        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state (15-puzzle parity rule)."""
        n = board.size
        inversions = 0
        seen: list[int] = []
        for v in board.cells:
            if v == 0:
                continue
            inversions += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        if n % 2 == 1:
            return inversions % 2 == 0
        rows_below_hole = n - 1 - board.empty_index // n
        return (inversions + rows_below_hole) % 2 == 0
