"""Undo stack of prior game snapshots."""

from __future__ import annotations

from backend.engine.gamestate.state import GameState
from backend.models.errors import NoHistory


class History:
    """Append-on-move, pop-on-undo stack of :class:`GameState` values.

    Snapshots are immutable, so the stack never aliases the live state.
    """

    def __init__(self) -> None:
        self._stack: list[GameState] = []

    def push(self, state: GameState) -> None:
        self._stack.append(state)

    def undo(self, current: GameState) -> GameState:
        """Discard *current* and return the snapshot before it."""
        if not self._stack:
            raise NoHistory()
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def peek(self) -> GameState | None:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)
