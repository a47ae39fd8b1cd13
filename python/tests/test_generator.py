"""Puzzle generator — random walk from the goal, always solvable."""

from __future__ import annotations

import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from puzzle.engine.gamegenerator import DEFAULT_SHUFFLE_STEPS, GameGenerator
from puzzle.engine.gamesolver import Solver
from puzzle.models.board import Board


def test_default_shuffle_steps() -> None:
    assert DEFAULT_SHUFFLE_STEPS == 80


def test_zero_steps_is_solved() -> None:
    board = GameGenerator.generate(3, 0, random.Random(0))
    assert board == Board.goal(3)
    assert board.is_solved()


def test_single_step_moves_hole_to_a_neighbor() -> None:
    board = GameGenerator.generate(3, 1, random.Random(0))
    assert board.empty_index in (5, 7)
    assert board.moves == 0
    assert not board.is_solved()


def test_seeded_generation_is_deterministic() -> None:
    a = GameGenerator.generate(3, 80, random.Random(42))
    b = GameGenerator.generate(3, 80, random.Random(42))
    assert a == b


def test_different_seeds_vary() -> None:
    boards = {GameGenerator.generate(3, 80, random.Random(seed)).cells for seed in range(20)}
    assert len(boards) > 1


def test_unseeded_generation_works() -> None:
    board = GameGenerator.generate(4)
    assert sorted(board.cells) == list(range(16))
    assert Solver.is_solvable(board)


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_generated_boards_are_solvable(size: int, rng: random.Random) -> None:
    for _ in range(25):
        board = GameGenerator.generate(size, DEFAULT_SHUFFLE_STEPS, rng)
        assert Solver.is_solvable(board)
        assert board.moves == 0


@pytest.mark.parametrize(
    ("size", "steps"),
    [(1, 10), (0, 10), (-3, 10), (3, -1), (3, 1.5), (True, 10), (3, "80")],
    ids=["size-1", "size-0", "size-neg", "steps-neg", "steps-float", "size-bool", "steps-str"],
)
def test_rejects_invalid_arguments(size, steps) -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(size, steps, random.Random(0))


@settings(max_examples=60, deadline=None)
@given(
    size=st.integers(min_value=2, max_value=6),
    steps=st.integers(min_value=0, max_value=200),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_generated_board_invariants(size: int, steps: int, seed: int) -> None:
    board = GameGenerator.generate(size, steps, random.Random(seed))
    assert sorted(board.cells) == list(range(size * size))
    assert board.cells[board.empty_index] == 0
    assert board.moves == 0
    assert Solver.is_solvable(board)
