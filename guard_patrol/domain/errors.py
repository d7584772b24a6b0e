"""Typed failures raised by the grid model, tracer and search."""

from __future__ import annotations


class GuardPatrolError(Exception):
    """Base class for every failure this package reports to callers."""


class NoStartPositionError(GuardPatrolError):
    """The grid holds no agent start marker, so no run is possible."""

    def __init__(self) -> None:
        super().__init__("No starting position found in grid")


class OutOfBoundsError(GuardPatrolError, IndexError):
    """A position outside ``[0, rows) x [0, cols)`` was indexed."""

    def __init__(self, position: tuple[int, int], rows: int, cols: int) -> None:
        super().__init__(f"Position {position} is outside a {rows}x{cols} grid")
        self.position = position


class InvalidObstructionError(GuardPatrolError):
    """An obstruction was requested on the start cell or an already blocked cell."""

    def __init__(self, position: tuple[int, int], reason: str) -> None:
        super().__init__(f"Cannot place obstruction at {position}: {reason}")
        self.position = position


class GridParseError(GuardPatrolError):
    """Input text does not describe a valid rectangular grid."""


class UnmodifiedGridLoopsError(GuardPatrolError):
    """The agent already loops on the unmodified grid."""

    def __init__(self) -> None:
        super().__init__("Agent loops on the unmodified grid; it never exits")
