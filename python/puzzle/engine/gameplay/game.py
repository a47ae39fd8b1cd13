"""Core gameplay logic — validates moves and tracks the win condition."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import NamedTuple

from puzzle.engine.gamegenerator import DEFAULT_SHUFFLE_STEPS, GameGenerator
from puzzle.engine.gamestate import GameState, Phase
from puzzle.models.board import Board, Direction, neighbors

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    board: Board
    accepted: bool
    completed: bool


def apply_move(board: Board, target: int) -> MoveResult:
    """Slide the tile at *target* into the hole.

    The move is accepted only when *target* is orthogonally adjacent to the
    hole. A rejected move returns *board* itself with both flags False.
    """
    if (
        isinstance(target, bool)
        or not isinstance(target, int)
        or target not in neighbors(board.empty_index, board.size)
    ):
        return MoveResult(board, False, False)

    cells = list(board.cells)
    empty = board.empty_index
    cells[empty], cells[target] = cells[target], cells[empty]
    moved = replace(board, cells=tuple(cells), empty_index=target, moves=board.moves + 1)
    return MoveResult(moved, True, moved.is_solved())


class GamePlay:
    """Orchestrates a single game session.

    The session is ``PLAYING`` until a move completes the picture, then
    ``COMPLETED``: the board is frozen and every move is rejected until
    :meth:`restart`.
    """

    def __init__(
        self,
        size: int = 3,
        shuffle_steps: int = DEFAULT_SHUFFLE_STEPS,
        rng: random.Random | None = None,
    ) -> None:
        self.size = size
        self.shuffle_steps = shuffle_steps
        self._rng = rng if rng is not None else random.Random()
        self.state = GameState(GameGenerator.generate(size, shuffle_steps, self._rng))

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board (e.g. a test fixture)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.shuffle_steps = DEFAULT_SHUFFLE_STEPS
        obj._rng = random.Random()
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move_tile(self, index: int) -> MoveResult:
        """Move the tile at *index* into the adjacent hole."""
        board = self.state.board
        if self.state.phase is Phase.COMPLETED:
            logger.debug("Board is completed; ignoring move to %d", index)
            return MoveResult(board, False, False)

        result = apply_move(board, index)
        if not result.accepted:
            logger.debug("Rejected move to %d (hole at %d)", index, board.empty_index)
            return result

        self.state.board = result.board
        if result.completed:
            self.state.complete()
            logger.debug("Puzzle completed in %d moves", result.board.moves)
        return result

    def move(self, direction: Direction) -> MoveResult:
        """Slide a tile in *direction* into the hole.

        E.g. ``Direction.UP`` moves the tile **below** the hole upward.
        """
        target = self.state.board.target_for(direction)
        if target is None:
            return MoveResult(self.state.board, False, False)
        return self.move_tile(target)

    def restart(self) -> None:
        """Discard the board and start over with a freshly shuffled one."""
        board = GameGenerator.generate(self.size, self.shuffle_steps, self._rng)
        self.state = GameState(board)
        logger.debug("Restarted %d×%d game", self.size, self.size)

    # -- queries --------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_won(self) -> bool:
        return self.state.phase is Phase.COMPLETED

    @property
    def movable_indices(self) -> frozenset[int]:
        if self.is_won:
            return frozenset()
        board = self.state.board
        return neighbors(board.empty_index, board.size)
