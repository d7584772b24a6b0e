"""Brute-force obstruction search: which single new obstacle traps the agent?

Every trial blocks one candidate cell on its own copy of the grid and traces
the agent from the original start state. Trials share nothing, so they can be
fanned out to a process pool and folded back into a single count.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterator
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from guard_patrol.config.constants import NUM_DIRECTIONS
from guard_patrol.config.types import SearchConfig
from guard_patrol.domain.direction import Position
from guard_patrol.domain.errors import UnmodifiedGridLoopsError
from guard_patrol.domain.grid import Grid
from guard_patrol.simulation.tracer import AgentState, RunOutcome, start_state, trace_path

logger = logging.getLogger(__name__)

TrialSink = Callable[[Position, RunOutcome], None]
"""Receives every ``(obstruction, outcome)`` pair in candidate order."""


@dataclass(frozen=True)
class ObstructionResult:
    """Aggregate of one obstruction search."""

    loop_count: int
    candidates_checked: int
    loop_positions: tuple[Position, ...]


def obstruction_candidates(
    grid: Grid,
    start_position: Position,
    restrict_to: Collection[Position] | None = None,
) -> list[Position]:
    """Open cells other than the start, row-major.

    When *restrict_to* is given, only positions inside it are kept.
    """
    candidates = [pos for pos in grid.open_positions() if pos != start_position]
    if restrict_to is not None:
        candidates = [pos for pos in candidates if pos in restrict_to]
    return candidates


def run_trial(grid: Grid, start: AgentState, position: Position) -> RunOutcome:
    """Trace one run with a single extra obstruction at *position*."""
    return trace_path(grid.with_blocked(position), start)


# Per-process base grid and start state, set once by the pool initializer
_POOL_CONTEXT: tuple[Grid, AgentState] | None = None


def _init_pool_worker(grid: Grid, start: AgentState) -> None:
    global _POOL_CONTEXT
    _POOL_CONTEXT = (grid, start)


def _run_pooled_trial(position: Position) -> RunOutcome:
    if _POOL_CONTEXT is None:
        raise RuntimeError("pool worker used before _init_pool_worker")
    grid, start = _POOL_CONTEXT
    return run_trial(grid, start, position)


def iter_trials(
    grid: Grid,
    start: AgentState,
    candidates: list[Position],
    config: SearchConfig,
) -> Iterator[tuple[Position, RunOutcome]]:
    """Yield ``(position, outcome)`` for each candidate, in candidate order.

    With more than one worker, the grid and start state are shipped to each
    process once through the pool initializer; tasks carry only a position.
    """
    if config.workers == 1 or len(candidates) < 2:
        for position in candidates:
            yield position, run_trial(grid, start, position)
        return

    with ProcessPoolExecutor(
        max_workers=config.workers,
        initializer=_init_pool_worker,
        initargs=(grid, start),
    ) as executor:
        outcomes = executor.map(_run_pooled_trial, candidates, chunksize=config.chunksize)
        yield from zip(candidates, outcomes, strict=True)


def _check_workload(grid: Grid, n_candidates: int, config: SearchConfig) -> None:
    work_units = n_candidates * grid.rows * grid.cols * NUM_DIRECTIONS
    if work_units > config.max_work_units:
        raise ValueError(
            f"search workload of {work_units} state visits exceeds safety threshold "
            f"{config.max_work_units}; use a smaller grid or raise max_work_units"
        )


def search_obstructions(
    grid: Grid,
    config: SearchConfig | None = None,
    trial_sink: TrialSink | None = None,
) -> ObstructionResult:
    """Count single-cell obstructions that turn an exiting run into a loop.

    Raises ``NoStartPositionError`` without a start marker and
    ``UnmodifiedGridLoopsError`` when the natural run never exits.
    """
    search_config = config or SearchConfig()
    start = start_state(grid)
    baseline = trace_path(grid, start)
    if baseline.looped:
        raise UnmodifiedGridLoopsError()

    restrict_to = baseline.visited if search_config.path_candidates_only else None
    candidates = obstruction_candidates(grid, start.position, restrict_to=restrict_to)
    _check_workload(grid, len(candidates), search_config)
    logger.info(
        "trying %d obstruction candidates on a %dx%d grid with %d worker(s)",
        len(candidates),
        grid.rows,
        grid.cols,
        search_config.workers,
    )

    loop_positions: list[Position] = []
    for position, outcome in iter_trials(grid, start, candidates, search_config):
        if outcome.looped:
            loop_positions.append(position)
        if trial_sink is not None:
            trial_sink(position, outcome)

    result = ObstructionResult(
        loop_count=len(loop_positions),
        candidates_checked=len(candidates),
        loop_positions=tuple(loop_positions),
    )
    logger.info(
        "%d of %d obstructions trap the agent", result.loop_count, result.candidates_checked
    )
    return result


def count_loop_obstructions(grid: Grid, config: SearchConfig | None = None) -> int:
    """Number of obstruction placements that produce a loop."""
    return search_obstructions(grid, config).loop_count
