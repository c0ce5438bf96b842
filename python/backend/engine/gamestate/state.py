"""Immutable snapshot of a robot grid game."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from backend.models.grid import Heading, Position
from backend.models.moves import MoveKind


@dataclass(frozen=True)
class GameState:
    """Position, heading, spent moves and log of one game.

    Every change produces a new instance, so older snapshots stay valid
    for the undo history.
    """

    position: Position
    heading: Heading
    start: Position
    end: Position
    start_heading: Heading = Heading.NORTH
    used: frozenset[MoveKind] = field(default_factory=frozenset)
    log: tuple[str, ...] = ()

    # -- construction ---------------------------------------------------------

    @classmethod
    def fresh(
        cls, start: Position, end: Position, heading: Heading = Heading.NORTH
    ) -> GameState:
        """Return a new game at *start* with every move available."""
        return cls(
            position=start,
            heading=heading,
            start=start,
            end=end,
            start_heading=heading,
        )

    def restarted(self) -> GameState:
        """Back to the start cell and heading with a full move budget."""
        return GameState.fresh(self.start, self.end, self.start_heading)

    def with_start_heading(self, heading: Heading) -> GameState:
        return replace(self, heading=heading, start_heading=heading)

    # -- budget ---------------------------------------------------------------

    @property
    def budget(self) -> dict[MoveKind, bool]:
        """``{kind: used}`` for all eight move kinds."""
        return {kind: kind in self.used for kind in MoveKind}

    def is_used(self, kind: MoveKind) -> bool:
        return kind in self.used

    @property
    def available(self) -> list[MoveKind]:
        return [kind for kind in MoveKind if kind not in self.used]

    # -- queries --------------------------------------------------------------

    @property
    def started(self) -> bool:
        return bool(self.used)

    @property
    def is_goal(self) -> bool:
        return is_goal(self)


def is_goal(state: GameState) -> bool:
    return state.position == state.end
