"""Greedy, axis-by-axis planner for the robot grid."""

from __future__ import annotations

import logging

from backend.engine.gamestate import GameState
from backend.models.errors import NoSolution
from backend.models.grid import Heading, Position
from backend.models.moves import MoveKind

logger = logging.getLogger(__name__)

# Clockwise degrees still to turn -> rotation kinds to try, in order.
_ROTATIONS: dict[int, tuple[MoveKind, ...]] = {
    90: (MoveKind.ROTATE_90_CW,),
    270: (MoveKind.ROTATE_90_CCW,),
    180: (MoveKind.ROTATE_180_CW, MoveKind.ROTATE_180_CCW),
}


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(state: GameState, target: Position | None = None) -> list[MoveKind]:
        """Return the moves that carry the robot to *target*.

        *target* defaults to the game's end cell. The x axis is handled
        before the y axis: turn to face the right way, then cover the
        distance with ``forward2`` and/or ``forward1``. There is no
        search; as soon as a needed kind is spent (already used, or
        claimed earlier in this plan) :class:`NoSolution` is raised.
        """
        if target is None:
            target = state.end

        used = set(state.used)
        heading = state.heading
        x, y = state.position.x, state.position.y
        plan: list[MoveKind] = []

        def take(kind: MoveKind) -> None:
            if kind in used:
                raise NoSolution(kind)
            used.add(kind)
            plan.append(kind)

        for delta, positive, negative in (
            (target.x - x, Heading.EAST, Heading.WEST),
            (target.y - y, Heading.NORTH, Heading.SOUTH),
        ):
            if delta == 0:
                continue
            required = positive if delta > 0 else negative

            turn = (heading - required) % 360
            if turn:
                choices = _ROTATIONS[turn]
                kind = next((k for k in choices if k not in used), choices[0])
                take(kind)
                heading = heading.rotated(kind.spec.degrees)

            distance = abs(delta)
            if distance >= 2:
                take(MoveKind.FORWARD_2)
                distance -= 2
            if distance == 1:
                take(MoveKind.FORWARD_1)

            ux, uy = heading.vector
            x, y = x + ux * abs(delta), y + uy * abs(delta)

        logger.debug(
            "plan %s -> %s: %s",
            state.position,
            target,
            ", ".join(k.value for k in plan) or "(none)",
        )
        return plan

    @staticmethod
    def hint(state: GameState) -> MoveKind | None:
        """Return the first planned move, or ``None`` if solved / no plan."""
        if state.is_goal:
            return None
        try:
            moves = Solver.solve(state)
        except NoSolution:
            return None
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(state: GameState) -> bool:
        """Return True if the planner finds a plan from *state*."""
        try:
            Solver.solve(state)
        except NoSolution:
            return False
        return True
