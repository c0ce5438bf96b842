from backend.models.coords import decode, encode
from backend.models.errors import (
    DuplicateEndpoints,
    HeadingLocked,
    InvalidCoordinateFormat,
    MoveAlreadyUsed,
    MoveError,
    NoHistory,
    NoSolution,
    OutOfBounds,
    RobotGridError,
)
from backend.models.grid import GRID_SIZE, Heading, Position
from backend.models.moves import MOVES, MoveKind, MoveSpec

__all__ = [
    "GRID_SIZE",
    "MOVES",
    "DuplicateEndpoints",
    "Heading",
    "HeadingLocked",
    "InvalidCoordinateFormat",
    "MoveAlreadyUsed",
    "MoveError",
    "MoveKind",
    "MoveSpec",
    "NoHistory",
    "NoSolution",
    "OutOfBounds",
    "Position",
    "RobotGridError",
    "decode",
    "encode",
]
