"""Path construction helpers for search output directories."""

from __future__ import annotations

from pathlib import Path

from guard_patrol.config.constants import SEARCH_SUMMARY_FILENAME, TRIAL_LOG_FILENAME


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def trial_log_path(out_dir: Path) -> Path:
    """Return path to the per-trial Parquet log."""
    return logs_dir(out_dir) / TRIAL_LOG_FILENAME


def search_summary_path(out_dir: Path) -> Path:
    """Return path to the search summary JSON file."""
    return out_dir / SEARCH_SUMMARY_FILENAME
