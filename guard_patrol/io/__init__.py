"""I/O layer: grid loading and search artifact persistence."""

from guard_patrol.io.loader import load_grid, parse_grid
from guard_patrol.io.persistence import TrialLogWriter, write_search_summary

__all__ = [
    "TrialLogWriter",
    "load_grid",
    "parse_grid",
    "write_search_summary",
]
