"""Validates and applies a single move to a game snapshot."""

from __future__ import annotations

import logging
from dataclasses import replace

from backend.engine.gamestate import GameState
from backend.models.errors import MoveAlreadyUsed, OutOfBounds
from backend.models.grid import Position, in_bounds
from backend.models.moves import MoveKind

logger = logging.getLogger(__name__)


def apply_move(state: GameState, kind: MoveKind) -> GameState:
    """Return the state after *kind*, or raise a :class:`MoveError`.

    Pure: *state* is never modified, and the undo history is the
    caller's business.
    """
    if state.is_used(kind):
        raise MoveAlreadyUsed(kind)

    spec = kind.spec
    position, heading = state.position, state.heading

    if spec.is_translation:
        ux, uy = heading.vector
        candidate = position.offset(ux * spec.distance, uy * spec.distance)
        if not in_bounds(*candidate):
            raise OutOfBounds(candidate)
        position = Position(*candidate)
        entry = f"{spec.label}: {state.position.label} -> {position.label}"
    else:
        heading = heading.rotated(spec.degrees)
        entry = f"{spec.label}: {state.heading.name} -> {heading.name}"

    logger.debug("applied %s (%s)", kind.value, entry)
    return replace(
        state,
        position=position,
        heading=heading,
        used=state.used | {kind},
        log=state.log + (entry,),
    )
