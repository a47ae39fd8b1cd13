"""Tracks the state of a game in progress."""

from __future__ import annotations

import time
from enum import StrEnum

from puzzle.models.board import Board


class Phase(StrEnum):
    PLAYING = "playing"
    COMPLETED = "completed"


class GameState:
    """Holds the current board, the session phase, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.phase = Phase.COMPLETED if board.is_solved() else Phase.PLAYING
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = self.phase is Phase.PLAYING

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running and self.phase is Phase.PLAYING:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return self.board.moves

    def complete(self) -> None:
        self.phase = Phase.COMPLETED
        self.pause()
