"""Shared fixtures for the puzzle test-suite."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from puzzle.models.board import Board

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


@pytest.fixture
def one_move_left() -> Board:
    """3×3 board one slide from solved: hole at index 7, tile 8 to its right."""
    return Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1954)


@pytest.fixture
def catalog_path() -> Path:
    return PROJECT_ROOT / "data" / "pictures.json"
