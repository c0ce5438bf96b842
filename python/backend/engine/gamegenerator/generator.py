"""Builds fresh robot grid games from labels or at random."""

from __future__ import annotations

import logging
import random

from backend.engine.gamestate import GameState
from backend.models.coords import decode
from backend.models.errors import DuplicateEndpoints
from backend.models.grid import GRID_SIZE, Heading, Position

logger = logging.getLogger(__name__)

DEFAULT_START = "A1"
DEFAULT_END = "C3"
DEFAULT_HEADING = Heading.NORTH


class GameGenerator:
    """Stateless factory; all methods are static."""

    @staticmethod
    def default() -> GameState:
        """The opening layout: A1 to C3, facing north."""
        return GameGenerator.configure(DEFAULT_START, DEFAULT_END, DEFAULT_HEADING)

    @staticmethod
    def configure(
        start: str, end: str, heading: Heading = DEFAULT_HEADING
    ) -> GameState:
        """Return a fresh game between two labelled cells.

        Raises ``InvalidCoordinateFormat`` for a malformed label and
        ``DuplicateEndpoints`` when both labels name the same cell.
        """
        start_pos = decode(start)
        end_pos = decode(end)
        if start_pos == end_pos:
            raise DuplicateEndpoints(start_pos)
        logger.info("configured %s -> %s facing %s", start_pos, end_pos, heading.name)
        return GameState.fresh(start_pos, end_pos, heading)

    @staticmethod
    def random(
        seed: int | None = None,
        rng: random.Random | None = None,
        heading: Heading = DEFAULT_HEADING,
    ) -> GameState:
        """Return a game with two distinct, uniformly chosen cells."""
        if rng is None:
            rng = random.Random(seed)
        start = GameGenerator._random_cell(rng)
        end = GameGenerator._random_cell(rng)
        while end == start:
            end = GameGenerator._random_cell(rng)
        logger.info("randomized %s -> %s", start, end)
        return GameState.fresh(start, end, heading)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _random_cell(rng: random.Random) -> Position:
        return Position(rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))
