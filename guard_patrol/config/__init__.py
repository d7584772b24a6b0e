"""Configuration layer: constants and typed config dataclasses."""

from guard_patrol.config.constants import (
    AGENT_MARKERS,
    BLOCKED_CHAR,
    DEFAULT_WORKERS,
    MAX_SEARCH_WORK_UNITS,
    NUM_DIRECTIONS,
    OPEN_CHAR,
    POOL_CHUNKSIZE,
)
from guard_patrol.config.types import RenderConfig, SearchConfig

__all__ = [
    "AGENT_MARKERS",
    "BLOCKED_CHAR",
    "DEFAULT_WORKERS",
    "MAX_SEARCH_WORK_UNITS",
    "NUM_DIRECTIONS",
    "OPEN_CHAR",
    "POOL_CHUNKSIZE",
    "RenderConfig",
    "SearchConfig",
]
