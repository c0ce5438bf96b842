"""Step-by-step playback of a planned move list.

The engine never sleeps: a frontend calls :meth:`Playback.step` (or
iterates) on its own schedule. Any change to the session made outside
the playback, such as a reset, undo or manual move, invalidates the
rest of the plan.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from backend.engine.gamestate import GameState
from backend.models.moves import MoveKind

if TYPE_CHECKING:
    from backend.engine.gameplay import GamePlay

logger = logging.getLogger(__name__)


class Playback:
    """Cancellable iterator that feeds a plan to a session one move at a time."""

    def __init__(self, session: GamePlay, plan: list[MoveKind]) -> None:
        self._session = session
        self._pending: deque[MoveKind] = deque(plan)
        self._expected: GameState = session.state
        self._cancelled = False
        self.applied: list[MoveKind] = []

    # -- status ---------------------------------------------------------------

    @property
    def remaining(self) -> list[MoveKind]:
        return list(self._pending)

    @property
    def cancelled(self) -> bool:
        if not self._cancelled and self._session.state is not self._expected:
            logger.debug("playback invalidated with %d moves left", len(self._pending))
            self._cancelled = True
        return self._cancelled

    @property
    def done(self) -> bool:
        return self.cancelled or not self._pending

    def cancel(self) -> None:
        self._cancelled = True

    # -- stepping -------------------------------------------------------------

    def step(self) -> GameState:
        """Apply the next planned move and return the new state.

        Raises ``StopIteration`` once the plan is exhausted or cancelled;
        move errors from the session propagate unchanged.
        """
        if self.done:
            raise StopIteration
        kind = self._pending[0]
        state = self._session.move(kind)
        self._pending.popleft()
        self._expected = state
        self.applied.append(kind)
        return state

    def __iter__(self) -> Iterator[GameState]:
        return self

    def __next__(self) -> GameState:
        return self.step()
