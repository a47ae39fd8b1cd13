"""Board model for the sliding picture puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction a *tile* slides into the hole."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def neighbors(index: int, size: int) -> frozenset[int]:
    """Return the indices orthogonally adjacent to *index* on a size×size grid.

    No wraparound: a corner has 2 neighbors, an edge cell 3, an interior
    cell 4.
    """
    if not 0 <= index < size * size:
        raise ValueError(
            f"Index {index} is outside a {size}×{size} board."
        )
    row, col = divmod(index, size)
    result: set[int] = set()
    if row > 0:
        result.add(index - size)  # up
    if row < size - 1:
        result.add(index + size)  # down
    if col > 0:
        result.add(index - 1)  # left
    if col < size - 1:
        result.add(index + 1)  # right
    return frozenset(result)


def goal_cells(size: int) -> tuple[int, ...]:
    """Return the solved arrangement ``(1, 2, ..., N²-1, 0)``."""
    return tuple(range(1, size * size)) + (0,)


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the puzzle.

    Cells are stored row-major as a flat tuple. 0 represents the hole.
    ``empty_index`` always points at the 0 cell and ``moves`` counts the
    accepted moves since the board was generated.
    """

    size: int
    cells: tuple[int, ...]
    empty_index: int
    moves: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))
        n = self.size
        if n < 2:
            raise ValueError(f"Board size must be at least 2, got {n}.")
        if len(self.cells) != n * n:
            raise ValueError(
                f"Expected {n * n} cells for a {n}×{n} board, "
                f"got {len(self.cells)}."
            )
        if sorted(self.cells) != list(range(n * n)):
            raise ValueError(
                f"Cells must be a permutation of 0..{n * n - 1}, "
                f"got {list(self.cells)}."
            )
        if not 0 <= self.empty_index < n * n or self.cells[self.empty_index] != 0:
            raise ValueError(
                f"Empty index {self.empty_index} does not hold the hole."
            )
        if self.moves < 0:
            raise ValueError(f"Move counter cannot be negative, got {self.moves}.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int], moves: int = 0) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        cells = tuple(flat)
        if 0 not in cells:
            raise ValueError("Board has no hole (cell value 0).")
        return cls(size=size, cells=cells, empty_index=cells.index(0), moves=moves)

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the solved board (all tiles in order, hole bottom-right)."""
        return cls(size=size, cells=goal_cells(size), empty_index=size * size - 1)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        n = self.size
        return tuple(self.cells[r * n : (r + 1) * n] for r in range(n))

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def index_of(self, value: int) -> int:
        return self.cells.index(value)

    def is_solved(self) -> bool:
        """Check the cells against the goal arrangement, element by element."""
        return self.cells == goal_cells(self.size)

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits in its goal position."""
        val = self.cells[index]
        if val == 0:
            return index == self.size * self.size - 1
        return index == val - 1

    def solved_position(self, value: int) -> tuple[int, int]:
        """Return the (row, col) where tile *value* belongs when solved."""
        if value == 0:
            return self.size - 1, self.size - 1
        return divmod(value - 1, self.size)

    def target_for(self, direction: Direction) -> int | None:
        """Index of the tile that slides into the hole in *direction*.

        E.g. ``Direction.UP`` picks the tile **below** the hole. Returns
        ``None`` when that tile would be off the board.
        """
        row, col = divmod(self.empty_index, self.size)
        # The offset points at the tile that will slide into the hole.
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = row + dr, col + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return tr * self.size + tc
