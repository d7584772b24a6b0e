"""Patrolling-guard grid simulation and loop-obstruction search."""

from guard_patrol.domain import Direction, Grid
from guard_patrol.io.loader import load_grid, parse_grid
from guard_patrol.simulation import (
    count_loop_obstructions,
    count_visited,
    search_obstructions,
    trace_path,
)

__all__ = [
    "Direction",
    "Grid",
    "count_loop_obstructions",
    "count_visited",
    "load_grid",
    "parse_grid",
    "search_obstructions",
    "trace_path",
]
