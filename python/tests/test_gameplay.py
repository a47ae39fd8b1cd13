"""Move application and the Playing → Completed session lifecycle."""

from __future__ import annotations

import random

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from puzzle.engine.gamegenerator import GameGenerator
from puzzle.engine.gameplay import GamePlay, apply_move
from puzzle.engine.gamesolver import Solver
from puzzle.engine.gamestate import Phase
from puzzle.models.board import Board, Direction, neighbors

boards = st.builds(
    lambda size, steps, seed: GameGenerator.generate(size, steps, random.Random(seed)),
    st.integers(min_value=2, max_value=5),
    st.integers(min_value=0, max_value=120),
    st.integers(min_value=0, max_value=2**32 - 1),
)


# -- apply_move ---------------------------------------------------------------


def test_accepted_move_completes(one_move_left: Board) -> None:
    result = apply_move(one_move_left, 8)
    assert result.accepted
    assert result.completed
    assert result.board.cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert result.board.empty_index == 8
    assert result.board.moves == 1


def test_non_adjacent_move_is_rejected(one_move_left: Board) -> None:
    result = apply_move(one_move_left, 0)
    assert not result.accepted
    assert not result.completed
    assert result.board is one_move_left
    assert result.board.moves == 0


def test_clicking_the_hole_is_rejected(one_move_left: Board) -> None:
    assert not apply_move(one_move_left, 7).accepted


def test_accepted_move_leaves_input_untouched(one_move_left: Board) -> None:
    before = one_move_left.cells
    apply_move(one_move_left, 4)
    assert one_move_left.cells == before
    assert one_move_left.empty_index == 7


def test_non_goal_move_is_not_completed(one_move_left: Board) -> None:
    result = apply_move(one_move_left, 6)
    assert result.accepted
    assert not result.completed
    assert result.board.cells == (1, 2, 3, 4, 5, 6, 0, 7, 8)


@settings(max_examples=80, deadline=None)
@given(board=boards, data=st.data())
def test_move_round_trip(board: Board, data: st.DataObject) -> None:
    target = data.draw(st.sampled_from(sorted(neighbors(board.empty_index, board.size))))
    there = apply_move(board, target)
    back = apply_move(there.board, board.empty_index)
    assert there.accepted and back.accepted
    assert back.board.cells == board.cells
    assert back.board.empty_index == board.empty_index
    assert back.board.moves == board.moves + 2


@settings(max_examples=80, deadline=None)
@given(board=boards, data=st.data())
def test_rejected_move_is_a_no_op(board: Board, data: st.DataObject) -> None:
    target = data.draw(st.integers(min_value=0, max_value=board.size * board.size - 1))
    assume(target not in neighbors(board.empty_index, board.size))
    result = apply_move(board, target)
    assert result.board == board
    assert not result.accepted
    assert not result.completed


@settings(max_examples=80, deadline=None)
@given(board=boards, data=st.data())
def test_completed_iff_goal(board: Board, data: st.DataObject) -> None:
    target = data.draw(st.sampled_from(sorted(neighbors(board.empty_index, board.size))))
    result = apply_move(board, target)
    goal = tuple(range(1, board.size * board.size)) + (0,)
    assert result.completed == (result.board.cells == goal)
    assert sorted(result.board.cells) == list(range(board.size * board.size))
    assert result.board.cells[result.board.empty_index] == 0


# -- session ------------------------------------------------------------------


def test_session_completes_and_freezes(one_move_left: Board) -> None:
    game = GamePlay.from_board(one_move_left)
    assert game.phase is Phase.PLAYING
    assert game.movable_indices == {4, 6, 8}

    assert not game.move_tile(0).accepted
    result = game.move_tile(8)
    assert result.accepted and result.completed
    assert game.phase is Phase.COMPLETED
    assert game.is_won

    frozen = game.state.board
    for target in (5, 7, 0):
        rejected = game.move_tile(target)
        assert not rejected.accepted
        assert not rejected.completed
    assert game.state.board is frozen
    assert game.state.moves == 1
    assert game.movable_indices == frozenset()


def test_clock_stops_on_completion(one_move_left: Board) -> None:
    game = GamePlay.from_board(one_move_left)
    game.move_tile(8)
    first = game.state.elapsed_time
    assert game.state.elapsed_time == first
    game.state.resume()
    assert game.state.elapsed_time == first


def test_keyboard_moves(one_move_left: Board) -> None:
    game = GamePlay.from_board(one_move_left)
    assert not game.move(Direction.UP).accepted
    assert game.state.moves == 0
    assert game.move(Direction.LEFT).completed
    assert game.is_won


def test_zero_shuffle_is_immediately_won() -> None:
    game = GamePlay(3, 0, random.Random(0))
    assert game.phase is Phase.COMPLETED
    assert not game.move_tile(7).accepted
    assert game.state.board == Board.goal(3)


def test_restart_returns_to_playing() -> None:
    game = GamePlay(3, 80, random.Random(11))
    for target in Solver.solve(game.state.board):
        assert game.move_tile(target).accepted
    assert game.phase is Phase.COMPLETED

    game.restart()
    assert game.phase is Phase.PLAYING
    assert game.state.moves == 0
    assert not game.state.board.is_solved()
    assert game.move_tile(sorted(game.movable_indices)[0]).accepted


def test_list_backed_goal_is_completed() -> None:
    board = Board(size=3, cells=[1, 2, 3, 4, 5, 6, 7, 8, 0], empty_index=8)  # type: ignore[arg-type]
    assert board.cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert board.is_solved()
    assert GamePlay.from_board(board).phase is Phase.COMPLETED


@pytest.mark.parametrize("target", [8.0, "8", True, None], ids=["float", "str", "bool", "none"])
def test_non_integer_target_is_rejected(one_move_left: Board, target) -> None:
    result = apply_move(one_move_left, target)
    assert result.board is one_move_left
    assert not result.accepted
    assert not result.completed


def test_seeded_sessions_match() -> None:
    a = GamePlay(3, 80, random.Random(7))
    b = GamePlay(3, 80, random.Random(7))
    assert a.state.board == b.state.board
    a.restart()
    b.restart()
    assert a.state.board == b.state.board


def test_move_counter_only_counts_accepted_moves(rng: random.Random) -> None:
    game = GamePlay(4, 80, rng)
    accepted = 0
    for _ in range(50):
        if game.is_won:
            break
        target = rng.randrange(16)
        if game.move_tile(target).accepted:
            accepted += 1
    assert game.state.moves == accepted
