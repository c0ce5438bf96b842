"""Solver test suite.

Every plan the solver returns is replayed through the real session
(``GamePlay.move``) to verify that it is legal and ends on the target.
The exhaustive suite covers every start/target pair for every initial
heading on a fresh budget.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.coords import all_labels, decode
from backend.models.errors import NoSolution
from backend.models.grid import Heading
from backend.models.moves import MoveKind

K = MoveKind


# -- helpers ------------------------------------------------------------------


def _state(
    start: str, end: str, heading: Heading, used: set[MoveKind] | None = None
) -> GameState:
    state = GameState.fresh(decode(start), decode(end), heading)
    if used:
        state = replace(state, used=frozenset(used))
    return state


def _assert_solve(state: GameState) -> list[MoveKind]:
    """Solve *state* and verify the returned moves reach the target."""
    moves = Solver.solve(state)

    # ---- move-list sanity ---------------------------------------------------
    assert isinstance(moves, list), "solve() must return a list of MoveKind"
    assert all(isinstance(m, MoveKind) for m in moves)
    assert len(set(moves)) == len(moves), "a plan must not reuse a move kind"
    assert not set(moves) & state.used, "a plan must not use spent moves"
    assert MoveKind.BACKWARD_1 not in moves and MoveKind.BACKWARD_2 not in moves

    # ---- apply moves via the real game engine and check win -----------------
    game = GamePlay(state)
    for move in moves:
        game.move(move)

    assert game.is_won, f"{state.end} not reached after {moves}"
    assert game.state.used == state.used | set(moves)
    return moves


# -- worked examples ----------------------------------------------------------


def test_two_axis_plan_turns_between_axes() -> None:
    state = _state("A1", "C2", Heading.NORTH)
    moves = _assert_solve(state)
    assert moves == [K.ROTATE_90_CW, K.FORWARD_2, K.ROTATE_90_CCW, K.FORWARD_1]


def test_two_axis_plan_needing_forward2_twice_has_no_solution() -> None:
    # A1 -> C3 needs two cells on each axis, but forward2 is single-use.
    with pytest.raises(NoSolution) as info:
        Solver.solve(_state("A1", "C3", Heading.NORTH))
    assert info.value.kind is K.FORWARD_2


def test_three_cells_uses_forward2_then_forward1() -> None:
    moves = _assert_solve(_state("A2", "D2", Heading.EAST))
    assert moves == [K.FORWARD_2, K.FORWARD_1]


def test_no_rotation_when_already_facing_the_target() -> None:
    assert _assert_solve(_state("B1", "B2", Heading.NORTH)) == [K.FORWARD_1]


def test_half_turn_prefers_clockwise() -> None:
    moves = _assert_solve(_state("C1", "A1", Heading.EAST))
    assert moves == [K.ROTATE_180_CW, K.FORWARD_2]


def test_half_turn_falls_back_to_counter_clockwise() -> None:
    state = _state("C1", "A1", Heading.EAST, used={K.ROTATE_180_CW})
    assert _assert_solve(state) == [K.ROTATE_180_CCW, K.FORWARD_2]


def test_half_turn_with_both_spent_has_no_solution() -> None:
    state = _state("C1", "A1", Heading.EAST, used={K.ROTATE_180_CW, K.ROTATE_180_CCW})
    with pytest.raises(NoSolution):
        Solver.solve(state)


def test_spent_quarter_turn_has_no_fallback() -> None:
    # Facing north, east is a clockwise quarter turn; the planner never
    # substitutes the other rotations.
    state = _state("A1", "B1", Heading.NORTH, used={K.ROTATE_90_CW})
    with pytest.raises(NoSolution) as info:
        Solver.solve(state)
    assert info.value.kind is K.ROTATE_90_CW


def test_spent_rotation_and_forward2_has_no_solution() -> None:
    state = _state("A1", "C1", Heading.NORTH, used={K.ROTATE_90_CW, K.FORWARD_2})
    with pytest.raises(NoSolution):
        Solver.solve(state)


def test_spent_forward1_is_not_replaced_by_backward() -> None:
    state = _state("B2", "B3", Heading.SOUTH, used={K.FORWARD_1})
    with pytest.raises(NoSolution) as info:
        Solver.solve(state)
    assert info.value.kind is K.FORWARD_1


def test_second_axis_rotation_is_relative_to_new_heading() -> None:
    moves = _assert_solve(_state("D1", "B2", Heading.NORTH))
    # NORTH -> WEST is counter-clockwise, then WEST -> NORTH is clockwise.
    assert moves == [K.ROTATE_90_CCW, K.FORWARD_2, K.ROTATE_90_CW, K.FORWARD_1]


def test_two_clockwise_quarter_turns_have_no_solution() -> None:
    # SOUTH -> WEST and WEST -> NORTH both need rotate90cw.
    with pytest.raises(NoSolution) as info:
        Solver.solve(_state("D1", "B2", Heading.SOUTH))
    assert info.value.kind is K.ROTATE_90_CW


def test_plan_from_mid_game_state() -> None:
    game = GamePlay.configure("A1", "D1", Heading.NORTH)
    game.move(K.ROTATE_90_CW)
    game.move(K.FORWARD_1)
    assert _assert_solve(game.state) == [K.FORWARD_2]


def test_explicit_target_overrides_end() -> None:
    state = _state("A1", "D4", Heading.NORTH)
    assert Solver.solve(state, decode("A3")) == [K.FORWARD_2]


def test_solving_at_the_target_returns_empty_plan() -> None:
    state = _state("B2", "C3", Heading.NORTH)
    assert Solver.solve(state, decode("B2")) == []


def test_solve_leaves_state_untouched() -> None:
    state = _state("A1", "C2", Heading.NORTH)
    Solver.solve(state)
    assert state == _state("A1", "C2", Heading.NORTH)


# -- hint / is_solvable -------------------------------------------------------


def test_hint_is_first_planned_move() -> None:
    assert Solver.hint(_state("A1", "C2", Heading.NORTH)) is K.ROTATE_90_CW


def test_hint_is_none_without_a_plan() -> None:
    assert Solver.hint(_state("A1", "C3", Heading.NORTH)) is None


def test_hint_is_none_at_the_goal() -> None:
    game = GamePlay.configure("A1", "A2", Heading.NORTH)
    game.move(K.FORWARD_1)
    assert Solver.hint(game.state) is None


def test_is_solvable() -> None:
    assert Solver.is_solvable(_state("A1", "C2", Heading.NORTH))
    assert not Solver.is_solvable(_state("A1", "C3", Heading.NORTH))


# -- exhaustive ---------------------------------------------------------------


_CASES = [
    (start, end, heading)
    for start in all_labels()
    for end in all_labels()
    if start != end
    for heading in Heading
]


@pytest.mark.parametrize(
    ("start", "end", "heading"),
    _CASES,
    ids=[f"{s}-{e}-{h.name}" for s, e, h in _CASES],
)
def test_every_plan_replays_to_the_target(start: str, end: str, heading: Heading) -> None:
    state = _state(start, end, heading)
    try:
        _assert_solve(state)
    except NoSolution as exc:
        assert exc.kind is not None
        assert not Solver.is_solvable(state)
