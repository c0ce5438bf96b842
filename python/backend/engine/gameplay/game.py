"""Session controller: one game's live state, undo history and plans."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.executor import apply_move
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState, History
from backend.engine.playback import Playback
from backend.models.errors import HeadingLocked
from backend.models.grid import Heading
from backend.models.moves import MoveKind

logger = logging.getLogger(__name__)

GoalListener = Callable[[GameState], None]


class GamePlay:
    """Orchestrates a single game session.

    The session owns exactly one current :class:`GameState` plus the
    history of states it replaced. Everything that changes the game
    goes through here; the state objects themselves never change.
    """

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameGenerator.default()
        self._history = History()
        self._goal_listeners: list[GoalListener] = []

    @classmethod
    def configure(
        cls, start: str, end: str, heading: Heading = Heading.NORTH
    ) -> GamePlay:
        """Create a session from two cell labels such as ``"A1"``, ``"C3"``."""
        return cls(GameGenerator.configure(start, end, heading))

    @classmethod
    def random(
        cls,
        seed: int | None = None,
        rng: random.Random | None = None,
        heading: Heading = Heading.NORTH,
    ) -> GamePlay:
        """Create a session with distinct random start and end cells."""
        return cls(GameGenerator.random(seed=seed, rng=rng, heading=heading))

    # -- read-only views ------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def history(self) -> History:
        return self._history

    @property
    def is_won(self) -> bool:
        return self._state.is_goal

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    # -- goal events ----------------------------------------------------------

    def on_goal(self, listener: GoalListener) -> None:
        """Call *listener* each time a move brings the robot onto the target."""
        self._goal_listeners.append(listener)

    def _emit_goal(self, state: GameState) -> None:
        logger.info("goal %s reached after %d moves", state.end.label, len(state.log))
        for listener in self._goal_listeners:
            listener(state)

    # -- movement -------------------------------------------------------------

    def move(self, kind: MoveKind) -> GameState:
        """Apply *kind*; on failure nothing changes and the error propagates."""
        previous = self._state
        new_state = apply_move(previous, kind)
        self._history.push(previous)
        self._state = new_state
        if new_state.is_goal and not previous.is_goal:
            self._emit_goal(new_state)
        return new_state

    def undo(self) -> GameState:
        self._state = self._history.undo(self._state)
        logger.debug("undo -> %s facing %s", self._state.position, self._state.heading.name)
        return self._state

    def reset(self) -> GameState:
        """Back to the start cell with every move available again."""
        self._replace(self._state.restarted())
        logger.info("reset to %s", self._state.start.label)
        return self._state

    def reconfigure(self, start: str, end: str) -> GameState:
        """Start a fresh game between two new cells, keeping the heading."""
        state = GameGenerator.configure(start, end, self._state.start_heading)
        self._replace(state)
        return state

    def randomize(
        self, seed: int | None = None, rng: random.Random | None = None
    ) -> GameState:
        state = GameGenerator.random(
            seed=seed, rng=rng, heading=self._state.start_heading
        )
        self._replace(state)
        return state

    def turn_start_heading(self) -> GameState:
        """Cycle the initial heading; only allowed before the first move."""
        if self._state.started:
            raise HeadingLocked()
        self._state = self._state.with_start_heading(self._state.heading.next())
        return self._state

    def _replace(self, state: GameState) -> None:
        self._history.clear()
        self._state = state

    # -- planning -------------------------------------------------------------

    def solve(self) -> list[MoveKind]:
        return Solver.solve(self._state)

    def hint(self) -> MoveKind | None:
        return Solver.hint(self._state)

    def play(self, plan: list[MoveKind] | None = None) -> Playback:
        """Return a step-by-step player for *plan* (default: a fresh solve)."""
        return Playback(self, self.solve() if plan is None else plan)
