from __future__ import annotations

import dataclasses

import pytest

from guard_patrol.config.constants import (
    AGENT_MARKERS,
    BLOCKED_CHAR,
    DEFAULT_WORKERS,
    FLUSH_THRESHOLD,
    MAX_SEARCH_WORK_UNITS,
    NUM_DIRECTIONS,
    OPEN_CHAR,
    POOL_CHUNKSIZE,
)
from guard_patrol.config.types import RenderConfig, SearchConfig


def test_markers_are_distinct_single_chars() -> None:
    chars = (OPEN_CHAR, BLOCKED_CHAR, *AGENT_MARKERS)
    assert all(len(c) == 1 for c in chars)
    assert len(set(chars)) == len(chars)


def test_one_marker_per_direction() -> None:
    assert len(AGENT_MARKERS) == NUM_DIRECTIONS == 4


def test_limits_are_positive_ints() -> None:
    for value in (DEFAULT_WORKERS, POOL_CHUNKSIZE, FLUSH_THRESHOLD, MAX_SEARCH_WORK_UNITS):
        assert isinstance(value, int) and value > 0


def test_search_config_defaults() -> None:
    config = SearchConfig()
    assert config.workers == DEFAULT_WORKERS
    assert config.path_candidates_only is False
    assert config.max_work_units == MAX_SEARCH_WORK_UNITS


def test_search_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        SearchConfig().workers = 4  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"workers": 0}, "workers must be >= 1"),
        ({"chunksize": 0}, "chunksize must be >= 1"),
        ({"max_work_units": 0}, "max_work_units must be >= 1"),
    ],
)
def test_search_config_validation(kwargs: dict[str, int], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        SearchConfig(**kwargs)


def test_render_config_validation() -> None:
    with pytest.raises(ValueError, match="cell_size_inches"):
        RenderConfig(cell_size_inches=0.0)
    with pytest.raises(ValueError, match="dpi"):
        RenderConfig(dpi=0)
