"""Recoverable failures raised by the robot grid engine.

Every error leaves the caller's state untouched; frontends catch
:class:`RobotGridError` and show ``str(exc)`` to the player.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.grid import Position
    from backend.models.moves import MoveKind


class RobotGridError(Exception):
    """Base class for all engine errors."""


class MoveError(RobotGridError):
    """A move could not be applied."""


class MoveAlreadyUsed(MoveError):
    def __init__(self, kind: MoveKind) -> None:
        self.kind = kind
        super().__init__(f"Move '{kind.label}' has already been used.")


class OutOfBounds(MoveError):
    def __init__(self, candidate: tuple[int, int]) -> None:
        self.candidate = candidate
        super().__init__(
            f"Move would leave the grid (to x={candidate[0]}, y={candidate[1]})."
        )


class InvalidCoordinateFormat(RobotGridError, ValueError):
    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(f"Invalid cell {raw!r}: expected a label like 'B3'.")


class DuplicateEndpoints(RobotGridError):
    def __init__(self, position: Position) -> None:
        self.position = position
        super().__init__(f"Start and end must differ (both are {position.label}).")


class NoHistory(RobotGridError):
    def __init__(self) -> None:
        super().__init__("Nothing to undo.")


class NoSolution(RobotGridError):
    """The planner needs a move kind that is already spent."""

    def __init__(self, kind: MoveKind | None = None) -> None:
        self.kind = kind
        if kind is None:
            msg = "No plan reaches the target with the remaining moves."
        else:
            msg = f"No plan: '{kind.label}' is needed but already used."
        super().__init__(msg)


class HeadingLocked(RobotGridError):
    def __init__(self) -> None:
        super().__init__("The start heading can only change before the first move.")
