"""Four-way facing with a clockwise turn rule."""

from __future__ import annotations

from enum import Enum

from guard_patrol.config.constants import AGENT_MARKERS

Position = tuple[int, int]
"""``(row, col)``; row 0 is the top line of the input."""


class Direction(Enum):
    """Facing of the agent, declared in clockwise order starting at Up."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turn_right(self) -> Direction:
        """Return the clockwise neighbour; period 4."""
        return _CLOCKWISE[(self.value + 1) % len(_CLOCKWISE)]

    @property
    def displacement(self) -> tuple[int, int]:
        """Unit ``(d_row, d_col)`` step for this facing."""
        return _DISPLACEMENTS[self]

    @property
    def marker(self) -> str:
        return AGENT_MARKERS[self.value]

    @classmethod
    def from_marker(cls, marker: str) -> Direction:
        """Parse one of ``^ > v <``."""
        try:
            return _CLOCKWISE[AGENT_MARKERS.index(marker)]
        except ValueError as exc:
            raise ValueError(f"not an agent marker: {marker!r}") from exc

    def advance(self, position: Position) -> Position:
        """Return the position one step ahead; may lie outside the grid."""
        d_row, d_col = _DISPLACEMENTS[self]
        return (position[0] + d_row, position[1] + d_col)


_CLOCKWISE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)

_DISPLACEMENTS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}
