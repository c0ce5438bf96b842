"""Chess-style cell labels (``A1`` .. ``D4``) <-> grid indices."""

from __future__ import annotations

from backend.models.errors import InvalidCoordinateFormat
from backend.models.grid import GRID_SIZE, Position, in_bounds


def encode(x: int, y: int) -> str:
    """Return the label for column *x*, row *y*.

    Example::

        encode(2, 0)  # "C1"
    """
    if not in_bounds(x, y):
        raise ValueError(f"({x}, {y}) is outside the {GRID_SIZE}×{GRID_SIZE} grid.")
    return f"{chr(ord('A') + x)}{y + 1}"


def decode(label: str) -> Position:
    """Parse a label such as ``"b3"`` into a :class:`Position`.

    Exactly one column letter followed by exactly one row digit; case
    is ignored. Anything else, whitespace included, is rejected.
    """
    raw = label
    text = label.upper() if isinstance(label, str) else ""
    if len(text) != 2:
        raise InvalidCoordinateFormat(raw)

    letter, digit = text
    x = ord(letter) - ord("A")
    if not ("A" <= letter <= "Z") or digit not in "0123456789":
        raise InvalidCoordinateFormat(raw)
    y = int(digit) - 1
    if not in_bounds(x, y):
        raise InvalidCoordinateFormat(raw)
    return Position(x, y)


def all_labels() -> list[str]:
    return [encode(x, y) for y in range(GRID_SIZE) for x in range(GRID_SIZE)]
