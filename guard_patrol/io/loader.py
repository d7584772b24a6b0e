"""Text-to-grid loading with boundary validation.

One grid row per non-empty line. Characters: ``.`` open, ``#`` blocked and
``^ > v <`` for the agent start. All validation happens here so the
simulation core never compares characters.
"""

from __future__ import annotations

from pathlib import Path

from guard_patrol.config.constants import AGENT_MARKERS, BLOCKED_CHAR, OPEN_CHAR
from guard_patrol.domain.direction import Direction
from guard_patrol.domain.errors import GridParseError
from guard_patrol.domain.grid import Cell, Grid


def _parse_char(char: str, row: int, col: int) -> Cell:
    if char == OPEN_CHAR:
        return Cell.OPEN
    if char == BLOCKED_CHAR:
        return Cell.BLOCKED
    if char in AGENT_MARKERS:
        return Cell.agent(Direction.from_marker(char))
    raise GridParseError(f"unexpected character {char!r} at row {row}, col {col}")


def parse_grid(text: str) -> Grid:
    """Parse grid text; raises ``GridParseError`` on malformed input.

    A grid without a start marker is accepted; tracing it later fails with
    ``NoStartPositionError``. More than one marker is rejected.
    """
    lines = [line.rstrip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise GridParseError("grid input is empty")

    width = len(lines[0])
    rows: list[list[Cell]] = []
    agents = 0
    for row_idx, line in enumerate(lines):
        if len(line) != width:
            raise GridParseError(
                f"row {row_idx} has length {len(line)}, expected {width}"
            )
        row = [_parse_char(char, row_idx, col_idx) for col_idx, char in enumerate(line)]
        agents += sum(1 for cell in row if cell.direction is not None)
        rows.append(row)

    if agents > 1:
        raise GridParseError(f"grid has {agents} agent start markers, expected one")
    return Grid.from_rows(rows)


def load_grid(path: Path) -> Grid:
    """Read and parse a grid file. I/O errors propagate as ``OSError``."""
    return parse_grid(Path(path).read_text(encoding="utf-8"))
