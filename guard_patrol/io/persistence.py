"""Parquet/JSON persistence for obstruction-search artifacts."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from guard_patrol.config.constants import FLUSH_THRESHOLD
from guard_patrol.domain.direction import Position
from guard_patrol.io.paths import logs_dir, search_summary_path, trial_log_path
from guard_patrol.io.schemas import TRIAL_LOG_SCHEMA, TRIAL_LOG_SCHEMA_VERSION
from guard_patrol.simulation.search import ObstructionResult
from guard_patrol.simulation.tracer import RunOutcome


def flush_trial_columns(
    trial_columns: dict[str, list[int | str]],
    log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trial rows to Parquet and clear in-memory buffers."""
    if not trial_columns["row"]:
        return writer
    table = pa.Table.from_pydict(trial_columns, schema=TRIAL_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(log_path, TRIAL_LOG_SCHEMA)
    writer.write_table(table)
    for values in trial_columns.values():
        values.clear()
    return writer


class TrialLogWriter:
    """Trial sink that streams ``(obstruction, outcome)`` rows to Parquet.

    Use as a context manager; an empty search still produces a readable,
    zero-row file. If the block raises, no log is left behind.
    """

    def __init__(self, out_dir: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.out_dir = Path(out_dir)
        self.path = trial_log_path(self.out_dir)
        self.flush_threshold = flush_threshold
        self.rows_written = 0
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[int | str]] = {
            name: [] for name in TRIAL_LOG_SCHEMA.names
        }

    def __enter__(self) -> TrialLogWriter:
        logs_dir(self.out_dir).mkdir(parents=True, exist_ok=True)
        return self

    def __call__(self, position: Position, outcome: RunOutcome) -> None:
        self._columns["row"].append(position[0])
        self._columns["col"].append(position[1])
        self._columns["termination"].append(outcome.termination.value)
        self._columns["visited_count"].append(len(outcome.visited))
        self._columns["steps"].append(outcome.steps)
        self.rows_written += 1
        if len(self._columns["row"]) >= self.flush_threshold:
            self._writer = flush_trial_columns(self._columns, self.path, self._writer)

    def __exit__(self, exc_type: type[BaseException] | None, *exc_info: object) -> None:
        if exc_type is None:
            self.close()
        else:
            self.discard()

    def discard(self) -> None:
        """Drop buffered rows and remove any partially written log."""
        if self._writer is not None:
            self._writer.close()
            self._writer = None
        for values in self._columns.values():
            values.clear()
        self.path.unlink(missing_ok=True)

    def close(self) -> None:
        self._writer = flush_trial_columns(self._columns, self.path, self._writer)
        if self._writer is None:
            pq.write_table(TRIAL_LOG_SCHEMA.empty_table(), self.path)
        else:
            self._writer.close()
            self._writer = None


def write_search_summary(
    out_dir: Path,
    result: ObstructionResult,
    visited_count: int | None = None,
    grid_shape: tuple[int, int] | None = None,
) -> Path:
    """Persist the search aggregate as JSON; returns the written path."""
    payload: dict[str, object] = {
        "schema_version": TRIAL_LOG_SCHEMA_VERSION,
        "loop_count": result.loop_count,
        "candidates_checked": result.candidates_checked,
        "loop_positions": [list(pos) for pos in result.loop_positions],
    }
    if visited_count is not None:
        payload["visited_count"] = visited_count
    if grid_shape is not None:
        payload["grid_rows"], payload["grid_cols"] = grid_shape
    path = search_summary_path(Path(out_dir))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    return path
