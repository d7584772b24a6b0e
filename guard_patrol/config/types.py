"""Configuration dataclasses for obstruction search and path rendering."""

from __future__ import annotations

from dataclasses import dataclass

from guard_patrol.config.constants import (
    DEFAULT_WORKERS,
    MAX_SEARCH_WORK_UNITS,
    POOL_CHUNKSIZE,
)

__all__ = [
    "MAX_SEARCH_WORK_UNITS",
    "RenderConfig",
    "SearchConfig",
]


@dataclass(frozen=True)
class SearchConfig:
    """Runtime knobs for one obstruction search."""

    workers: int = DEFAULT_WORKERS
    path_candidates_only: bool = False
    chunksize: int = POOL_CHUNKSIZE
    max_work_units: int = MAX_SEARCH_WORK_UNITS

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.chunksize < 1:
            raise ValueError("chunksize must be >= 1")
        if self.max_work_units < 1:
            raise ValueError("max_work_units must be >= 1")


@dataclass(frozen=True)
class RenderConfig:
    """Figure settings for the path renderer."""

    cell_size_inches: float = 0.35
    dpi: int = 120
    show_grid_lines: bool = True
    title: str | None = None

    def __post_init__(self) -> None:
        if self.cell_size_inches <= 0.0:
            raise ValueError("cell_size_inches must be > 0")
        if self.dpi < 1:
            raise ValueError("dpi must be >= 1")
