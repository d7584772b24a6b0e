"""Centralized constants for grid parsing and obstruction search.

All magic characters and limits that appear across multiple modules are
defined here. Consuming modules should import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

OPEN_CHAR = "."
"""Character for an open floor cell."""

BLOCKED_CHAR = "#"
"""Character for an obstructed cell."""

AGENT_MARKERS: tuple[str, ...] = ("^", ">", "v", "<")
"""Agent start markers, facing Up, Right, Down, Left in that order."""

NUM_DIRECTIONS = 4
"""Number of facings; also the per-cell factor of the state-space bound."""

DEFAULT_WORKERS = 1
"""Default worker process count for obstruction trials (1 = in-process)."""

POOL_CHUNKSIZE = 64
"""Candidate positions handed to a pool worker per dispatch."""

MAX_SEARCH_WORK_UNITS = 50_000_000_000
"""Safety cap on candidates * rows * cols * 4, the worst-case search cost."""

TRIAL_LOG_FILENAME = "obstruction_trials.parquet"
"""Per-trial Parquet log written under ``<out_dir>/logs``."""

SEARCH_SUMMARY_FILENAME = "search_summary.json"
"""JSON summary written at the root of ``<out_dir>``."""

FLUSH_THRESHOLD = 8_192
"""Flush trial log rows to Parquet once this in-memory row count is reached."""
