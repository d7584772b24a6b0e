"""Single-run path tracer with explicit cycle detection.

A run terminates in one of two ways:

- ``EXITED``: the next step would leave the grid.
- ``LOOPED``: the agent reaches an ``AgentState`` it has already occupied.

Both position and facing are part of the state, so a run is bounded by
``rows * cols * 4`` forward moves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from guard_patrol.domain.direction import Direction, Position
from guard_patrol.domain.errors import NoStartPositionError, UnmodifiedGridLoopsError
from guard_patrol.domain.grid import Grid

logger = logging.getLogger(__name__)


class Termination(Enum):
    """How a run ended."""

    EXITED = "exited"
    LOOPED = "looped"


@dataclass(frozen=True)
class AgentState:
    """Position and facing; the complete cycle-detection key."""

    position: Position
    direction: Direction


@dataclass(frozen=True)
class RunOutcome:
    """Terminal result of one traced run."""

    termination: Termination
    visited: frozenset[Position]
    steps: int
    final_state: AgentState

    @property
    def looped(self) -> bool:
        return self.termination is Termination.LOOPED

    @property
    def exited(self) -> bool:
        return self.termination is Termination.EXITED


def next_state(grid: Grid, state: AgentState) -> AgentState | None:
    """Return the state after one forward move, or ``None`` if the agent exits.

    Blocked cells ahead rotate the facing clockwise without moving. An agent
    boxed in on all four sides gets its own state back.
    """
    direction = state.direction
    for _ in range(len(Direction)):
        candidate = direction.advance(state.position)
        if not grid.contains(candidate):
            return None
        if not grid.is_blocked(candidate):
            return AgentState(position=candidate, direction=direction)
        direction = direction.turn_right()
    return state


def trace_path(grid: Grid, start: AgentState) -> RunOutcome:
    """Run the agent from *start* until it exits or repeats a state."""
    visited: set[Position] = {start.position}
    seen: set[AgentState] = {start}
    state = start
    steps = 0
    while True:
        moved = next_state(grid, state)
        if moved is None:
            termination = Termination.EXITED
            break
        state = moved
        steps += 1
        visited.add(state.position)
        if state in seen:
            termination = Termination.LOOPED
            break
        seen.add(state)

    logger.debug(
        "run from %s %s %s after %d steps (%d cells)",
        start.position,
        start.direction.name,
        termination.value,
        steps,
        len(visited),
    )
    return RunOutcome(
        termination=termination,
        visited=frozenset(visited),
        steps=steps,
        final_state=state,
    )


def start_state(grid: Grid) -> AgentState:
    """Locate the agent; raises ``NoStartPositionError`` when there is none."""
    found = grid.find_start()
    if found is None:
        raise NoStartPositionError()
    position, direction = found
    return AgentState(position=position, direction=direction)


def trace_from_start(grid: Grid) -> RunOutcome:
    """Trace the unmodified run from the grid's own start marker."""
    return trace_path(grid, start_state(grid))


def count_visited(grid: Grid) -> int:
    """Distinct cells the agent covers before leaving the grid."""
    outcome = trace_from_start(grid)
    if outcome.looped:
        raise UnmodifiedGridLoopsError()
    return len(outcome.visited)
