"""Grid geometry for the robot puzzle: positions and headings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GRID_SIZE = 4


class Heading(IntEnum):
    """Cardinal heading in degrees, counter-clockwise from east."""

    EAST = 0
    NORTH = 90
    WEST = 180
    SOUTH = 270

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]

    def rotated(self, degrees: int) -> Heading:
        """Return the heading after turning *degrees* clockwise.

        Positive degrees are clockwise as displayed, so they are
        subtracted from the counter-clockwise heading angle.
        """
        return Heading((self - degrees + 360) % 360)

    def next(self) -> Heading:
        """Cycle E -> N -> W -> S -> E (initial-heading picker order)."""
        return Heading((self + 90) % 360)


_VECTORS: dict[Heading, tuple[int, int]] = {
    Heading.EAST: (1, 0),
    Heading.NORTH: (0, 1),
    Heading.WEST: (-1, 0),
    Heading.SOUTH: (0, -1),
}


@dataclass(frozen=True)
class Position:
    """A cell on the grid. ``(0, 0)`` is A1, bottom-left."""

    x: int
    y: int

    @property
    def label(self) -> str:
        from backend.models.coords import encode

        return encode(self.x, self.y)

    def offset(self, dx: int, dy: int) -> tuple[int, int]:
        """Return the raw coordinates shifted by (dx, dy), unchecked."""
        return self.x + dx, self.y + dy

    def __str__(self) -> str:
        return self.label


def in_bounds(x: int, y: int, size: int = GRID_SIZE) -> bool:
    return 0 <= x < size and 0 <= y < size
