"""Domain layer: facing, grid model, and failure taxonomy."""

from guard_patrol.domain.direction import Direction, Position
from guard_patrol.domain.errors import (
    GridParseError,
    GuardPatrolError,
    InvalidObstructionError,
    NoStartPositionError,
    OutOfBoundsError,
    UnmodifiedGridLoopsError,
)
from guard_patrol.domain.grid import Cell, Grid

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "GridParseError",
    "GuardPatrolError",
    "InvalidObstructionError",
    "NoStartPositionError",
    "OutOfBoundsError",
    "Position",
    "UnmodifiedGridLoopsError",
]
