"""Immutable rectangular grid of typed cells backed by a numpy array.

Cells are stored as ``Cell`` codes in a read-only ``int8`` array. Trials that
need a modified grid get a fresh copy from ``Grid.with_blocked`` so no two
runs ever share mutable state.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from guard_patrol.config.constants import AGENT_MARKERS, BLOCKED_CHAR, OPEN_CHAR
from guard_patrol.domain.direction import Direction, Position
from guard_patrol.domain.errors import InvalidObstructionError, OutOfBoundsError


class Cell(IntEnum):
    """Closed set of cell kinds; agent-start cells carry their facing."""

    OPEN = 0
    BLOCKED = 1
    AGENT_UP = 2
    AGENT_RIGHT = 3
    AGENT_DOWN = 4
    AGENT_LEFT = 5

    @property
    def direction(self) -> Direction | None:
        """Facing of an agent-start cell, ``None`` for Open/Blocked."""
        if self < Cell.AGENT_UP:
            return None
        return Direction(self - Cell.AGENT_UP)

    @property
    def char(self) -> str:
        if self is Cell.OPEN:
            return OPEN_CHAR
        if self is Cell.BLOCKED:
            return BLOCKED_CHAR
        return AGENT_MARKERS[self - Cell.AGENT_UP]

    @classmethod
    def agent(cls, direction: Direction) -> Cell:
        return cls(cls.AGENT_UP + direction.value)


@dataclass(frozen=True, eq=False)
class Grid:
    """Read-only ``rows x cols`` cell matrix with bounds queries."""

    cells: np.ndarray

    def __post_init__(self) -> None:
        cells = np.array(self.cells, dtype=np.int8, copy=True)
        if cells.ndim != 2:
            raise ValueError("grid cells must be a 2-D array")
        if cells.shape[0] < 1 or cells.shape[1] < 1:
            raise ValueError("grid must be at least 1x1")
        # Own copy; the caller's array stays writeable.
        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> Grid:
        """Build a grid from equal-length rows of cells."""
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError("all grid rows must have the same length")
        return cls(cells=np.array([[int(c) for c in row] for row in rows], dtype=np.int8))

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cells.shape[1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash((self.cells.shape, self.cells.tobytes()))

    def contains(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.cells.shape[0] and 0 <= col < self.cells.shape[1]

    def at(self, pos: Position) -> Cell:
        """Return the cell at *pos*; raises ``OutOfBoundsError`` outside the grid."""
        if not self.contains(pos):
            raise OutOfBoundsError(pos, self.rows, self.cols)
        return Cell(int(self.cells[pos]))

    def is_blocked(self, pos: Position) -> bool:
        if not self.contains(pos):
            raise OutOfBoundsError(pos, self.rows, self.cols)
        return int(self.cells[pos]) == Cell.BLOCKED

    def is_edge(self, pos: Position) -> bool:
        """True iff *pos* lies on the first/last row or first/last column."""
        if not self.contains(pos):
            raise OutOfBoundsError(pos, self.rows, self.cols)
        row, col = pos
        return row == 0 or row == self.rows - 1 or col == 0 or col == self.cols - 1

    def find_start(self) -> tuple[Position, Direction] | None:
        """Locate the agent start marker (first in row-major order)."""
        hits = np.argwhere(self.cells >= Cell.AGENT_UP)
        if len(hits) == 0:
            return None
        row, col = (int(v) for v in hits[0])
        direction = Cell(int(self.cells[row, col])).direction
        assert direction is not None
        return (row, col), direction

    def with_blocked(self, pos: Position) -> Grid:
        """Return a copy with *pos* forced to ``BLOCKED``.

        Blocking the start cell or an already blocked cell is rejected with
        ``InvalidObstructionError``; callers filter those out beforehand.
        """
        cell = self.at(pos)
        if cell is Cell.BLOCKED:
            raise InvalidObstructionError(pos, "cell is already blocked")
        if cell.direction is not None:
            raise InvalidObstructionError(pos, "cell is the agent start")
        cells = self.cells.copy()
        cells[pos] = Cell.BLOCKED
        return Grid(cells=cells)

    def open_positions(self) -> Iterator[Position]:
        """Yield every Open cell in row-major order."""
        for row, col in np.argwhere(self.cells == Cell.OPEN):
            yield (int(row), int(col))

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self.cells == cell))

    def to_lines(self) -> list[str]:
        """Render back to the character form, one string per row."""
        return ["".join(Cell(int(v)).char for v in row) for row in self.cells]
