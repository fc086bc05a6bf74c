import logging

import pytest

from polyy.core.board import Board
from polyy.core.errors import IllegalMoveError
from polyy.core.moves import Move, SWAP
from polyy.core.rules import ExecuteResult, PolyYRules, RuleConfig
from polyy.core.state import GameState
from polyy.core.state_invariants import assert_state_invariant

P = Move.place


def test_new_game(y3):
    state = GameState(y3)
    assert state.next_player() == 0
    assert state.scores() == (0, 0)
    assert not state.over()
    assert state.result() is None
    assert state.legal_moves() == [P(i) for i in range(6)]


def test_turn_alternates(y3):
    state = GameState(y3)
    assert state.execute(P(0))
    assert state.next_player() == 1
    assert state.execute(P(1))
    assert state.next_player() == 0


def test_place_rejections_leave_state_unchanged(y3):
    state = GameState(y3)
    state.execute(P(2))
    assert state.execute(P(2)) is ExecuteResult.OCCUPIED
    assert state.execute(P(6)) is ExecuteResult.INVALID_FIELD
    assert state.execute(P(-1)) is ExecuteResult.INVALID_FIELD
    assert state.moves == [P(2)]


def test_execute_result_truthiness():
    assert ExecuteResult.APPLIED
    assert not ExecuteResult.OCCUPIED
    assert not ExecuteResult.SWAP_NOT_ALLOWED


def test_execute_requires_a_move(y3):
    with pytest.raises(TypeError):
        GameState(y3).execute(3)


def test_swap_only_as_second_move(y3):
    state = GameState(y3)
    assert state.execute(SWAP) is ExecuteResult.SWAP_NOT_ALLOWED
    state.execute(P(4))
    assert state.legal_moves()[0] == SWAP
    assert state.execute(SWAP) is ExecuteResult.APPLIED
    assert state.execute(SWAP) is ExecuteResult.SWAP_NOT_ALLOWED
    state.execute(P(0))
    assert state.execute(SWAP) is ExecuteResult.SWAP_NOT_ALLOWED
    assert state.moves == [P(4), SWAP, P(0)]


def test_swap_keeps_field_occupied(y3):
    state = GameState(y3)
    state.execute(P(4))
    state.execute(SWAP)
    assert state.occupied(4)
    assert state.occupied_count() == 1
    assert state.next_player() == 0
    assert state.execute(P(4)) is ExecuteResult.OCCUPIED
    assert state.colors()[4] == -1


def test_swap_can_be_disabled(y3):
    state = GameState(y3, PolyYRules(RuleConfig(swap_allowed=False)))
    state.execute(P(4))
    assert state.execute(SWAP) is ExecuteResult.SWAP_NOT_ALLOWED
    assert SWAP not in state.legal_moves()


def test_occupied_is_monotonic(y3):
    state = GameState(y3)
    seen = set()
    for move in [P(3), SWAP, P(0), P(5), P(1)]:
        assert state.execute(move)
        now = {f for f in range(6) if state.occupied(f)}
        assert seen <= now
        seen = now
    assert seen == {0, 1, 3, 5}


def test_majority_ends_game(y3):
    state = GameState.replay(y3, [P(1), P(0), P(4), P(3)])
    assert not state.over()
    state.execute(P(2))
    assert state.scores() == (3, 0)
    assert state.over()
    result = state.result()
    assert (result.winner, result.type) == (0, "MAJORITY")
    assert state.winner() == 0


def test_full_board_ends_game_without_corners(triangle):
    state = GameState.replay(triangle, [P(0), P(1), P(2)])
    assert state.scores() == (0, 0)
    assert state.over()
    result = state.result()
    assert result.type == "BOARD_FULL"
    assert result.winner is None


def test_board_full_counts_fields_not_moves(triangle):
    state = GameState.replay(triangle, [P(0), SWAP, P(1)])
    assert len(state.moves) == triangle.n_fields
    assert not state.over()
    state.execute(P(2))
    assert state.over()


def test_board_full_by_move_count_variant(triangle):
    rules = PolyYRules(RuleConfig(fill_by_move_count=True))
    state = GameState.replay(triangle, [P(0), SWAP, P(1)], rules)
    assert state.over()


def test_over_is_monotonic(y3):
    state = GameState.replay(y3, [P(1), P(0), P(4), P(3), P(2)])
    assert state.over()
    assert state.execute(P(2)) is ExecuteResult.OCCUPIED
    assert state.execute(SWAP) is ExecuteResult.SWAP_NOT_ALLOWED
    assert state.over()
    state.execute(P(5))
    assert state.over()


def test_scores_are_a_function_of_the_moves(y3):
    moves = [P(3), P(4), P(5), P(2), P(1), P(0)]
    first = GameState.replay(y3, moves)
    second = GameState.replay(y3, moves)
    assert first.scores() == second.scores()
    assert first == second


def test_replay_reports_first_illegal_move(y3):
    with pytest.raises(IllegalMoveError) as exc:
        GameState.replay(y3, [P(0), P(1), SWAP])
    assert exc.value.index == 2
    assert exc.value.result is ExecuteResult.SWAP_NOT_ALLOWED


def test_copy_is_independent(y3):
    state = GameState.replay(y3, [P(0)])
    clone = state.copy()
    clone.execute(P(1))
    assert state.moves == [P(0)]
    assert clone.board is state.board


def test_transcript(y3):
    state = GameState.replay(y3, [P(4), SWAP, P(0)])
    assert state.to_transcript() == "5 -1 1\n"


def test_debug_mode_checks_invariants(y3):
    state = GameState(y3, debug=True)
    for move in [P(0), SWAP, P(5)]:
        assert state.execute(move)
    state.moves.append(P(5))
    with pytest.raises(AssertionError, match="DOUBLE PLACEMENT"):
        assert_state_invariant(state, "test")


def test_rejections_are_logged(y3, caplog):
    state = GameState(y3)
    with caplog.at_level(logging.DEBUG, logger="polyy.core.state"):
        state.execute(SWAP)
    assert "Rejected" in caplog.text


def test_debug_mode_accepts_non_planar_boards():
    # every field lies on every side, so both players capture all corners
    board = Board([[], [], []], [[0, 1], [0, 1], [0, 1]])
    state = GameState(board, debug=True)
    assert state.execute(P(0))
    assert state.execute(P(1))
    assert state.moves == [P(0), P(1)]
    assert state.scores() == (3, 3)
