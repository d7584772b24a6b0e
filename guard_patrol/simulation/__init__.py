"""Simulation layer: single-run tracer and obstruction search."""

from guard_patrol.simulation.search import (
    ObstructionResult,
    count_loop_obstructions,
    iter_trials,
    obstruction_candidates,
    run_trial,
    search_obstructions,
)
from guard_patrol.simulation.tracer import (
    AgentState,
    RunOutcome,
    Termination,
    count_visited,
    next_state,
    start_state,
    trace_from_start,
    trace_path,
)

__all__ = [
    "AgentState",
    "ObstructionResult",
    "RunOutcome",
    "Termination",
    "count_loop_obstructions",
    "count_visited",
    "iter_trials",
    "next_state",
    "obstruction_candidates",
    "run_trial",
    "search_obstructions",
    "start_state",
    "trace_from_start",
    "trace_path",
]
