"""Cancellable step-by-step playback of solver plans."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.playback import Playback
from backend.models.errors import MoveAlreadyUsed
from backend.models.grid import Heading
from backend.models.moves import MoveKind

K = MoveKind


@pytest.fixture
def game() -> GamePlay:
    return GamePlay.configure("A1", "C2", Heading.NORTH)


def test_playback_runs_plan_to_the_goal(game: GamePlay) -> None:
    playback = game.play()
    states = list(playback)
    assert len(states) == 4
    assert states[-1] is game.state
    assert game.is_won
    assert playback.done and not playback.cancelled
    assert playback.applied == [K.ROTATE_90_CW, K.FORWARD_2, K.ROTATE_90_CCW, K.FORWARD_1]
    assert len(game.history) == 4


def test_step_reports_remaining(game: GamePlay) -> None:
    playback = game.play()
    playback.step()
    assert playback.remaining == [K.FORWARD_2, K.ROTATE_90_CCW, K.FORWARD_1]
    assert not playback.done


def test_reset_between_steps_invalidates_plan(game: GamePlay) -> None:
    playback = game.play()
    playback.step()
    game.reset()
    assert playback.cancelled
    assert list(playback) == []
    assert game.state.position == game.state.start


def test_manual_undo_invalidates_plan(game: GamePlay) -> None:
    playback = game.play()
    playback.step()
    playback.step()
    game.undo()
    with pytest.raises(StopIteration):
        playback.step()
    assert game.state.used == {K.ROTATE_90_CW}


def test_manual_move_before_first_step_invalidates_plan(game: GamePlay) -> None:
    playback = game.play()
    game.move(K.ROTATE_180_CW)
    assert playback.done
    assert playback.applied == []


def test_cancel_stops_playback(game: GamePlay) -> None:
    playback = game.play()
    playback.step()
    playback.cancel()
    assert playback.done
    assert list(playback) == []
    assert len(game.state.log) == 1


def test_empty_plan_is_immediately_done(game: GamePlay) -> None:
    playback = Playback(game, [])
    assert playback.done
    assert list(playback) == []


def test_stale_plan_surfaces_move_errors(game: GamePlay) -> None:
    playback = game.play([K.FORWARD_1, K.FORWARD_1])
    playback.step()
    with pytest.raises(MoveAlreadyUsed):
        playback.step()
    assert playback.remaining == [K.FORWARD_1]
