"""The fixed catalog of eight single-use robot moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MoveKind(StrEnum):
    FORWARD_1 = "forward1"
    FORWARD_2 = "forward2"
    BACKWARD_1 = "back1"
    BACKWARD_2 = "back2"
    ROTATE_90_CW = "rotate90cw"
    ROTATE_90_CCW = "rotate90ccw"
    ROTATE_180_CW = "rotate180cw"
    ROTATE_180_CCW = "rotate180ccw"

    @property
    def spec(self) -> MoveSpec:
        return MOVES[self]

    @property
    def label(self) -> str:
        return MOVES[self].label


class Action(StrEnum):
    TRANSLATE = "translate"
    ROTATE = "rotate"


@dataclass(frozen=True)
class MoveSpec:
    """Effect of one move kind.

    For translations ``sign`` is +1 (forward) or -1 (backward) and
    ``magnitude`` counts cells. For rotations ``sign`` is +1 (clockwise)
    or -1 (counter-clockwise) and ``magnitude`` is in degrees.
    """

    kind: MoveKind
    action: Action
    magnitude: int
    sign: int
    label: str

    @property
    def is_translation(self) -> bool:
        return self.action is Action.TRANSLATE

    @property
    def degrees(self) -> int:
        """Signed rotation, positive = clockwise. Zero for translations."""
        return self.sign * self.magnitude if self.action is Action.ROTATE else 0

    @property
    def distance(self) -> int:
        """Signed cell count along the heading. Zero for rotations."""
        return self.sign * self.magnitude if self.is_translation else 0


def _t(kind: MoveKind, magnitude: int, sign: int, label: str) -> MoveSpec:
    return MoveSpec(kind, Action.TRANSLATE, magnitude, sign, label)


def _r(kind: MoveKind, magnitude: int, sign: int, label: str) -> MoveSpec:
    return MoveSpec(kind, Action.ROTATE, magnitude, sign, label)


MOVES: dict[MoveKind, MoveSpec] = {
    MoveKind.FORWARD_1: _t(MoveKind.FORWARD_1, 1, 1, "Forward 1"),
    MoveKind.FORWARD_2: _t(MoveKind.FORWARD_2, 2, 1, "Forward 2"),
    MoveKind.BACKWARD_1: _t(MoveKind.BACKWARD_1, 1, -1, "Backward 1"),
    MoveKind.BACKWARD_2: _t(MoveKind.BACKWARD_2, 2, -1, "Backward 2"),
    MoveKind.ROTATE_90_CW: _r(MoveKind.ROTATE_90_CW, 90, 1, "Rotate 90° cw"),
    MoveKind.ROTATE_90_CCW: _r(MoveKind.ROTATE_90_CCW, 90, -1, "Rotate 90° ccw"),
    MoveKind.ROTATE_180_CW: _r(MoveKind.ROTATE_180_CW, 180, 1, "Rotate 180° cw"),
    MoveKind.ROTATE_180_CCW: _r(MoveKind.ROTATE_180_CCW, 180, -1, "Rotate 180° ccw"),
}
