"""Parquet schema for obstruction-trial artifacts."""

from __future__ import annotations

import pyarrow as pa

TRIAL_LOG_SCHEMA_VERSION = 1

TRIAL_LOG_SCHEMA = pa.schema(
    [
        ("row", pa.int64()),
        ("col", pa.int64()),
        ("termination", pa.string()),
        ("visited_count", pa.int64()),
        ("steps", pa.int64()),
    ]
)
