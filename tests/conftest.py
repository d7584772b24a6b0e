from __future__ import annotations

from pathlib import Path

import pytest

from guard_patrol.domain.grid import Grid
from guard_patrol.io.loader import load_grid, parse_grid

DATA_DIR = Path(__file__).resolve().parent / "data"

# Four obstacles arranged so the agent circles the 2x2 block in the middle.
LOOPING_GRID = """\
.#..
...#
#^..
..#.
"""


@pytest.fixture
def sample_path() -> Path:
    """Published 10x10 patrol sample: 41 cells visited, 6 loop obstructions."""
    return DATA_DIR / "sample_patrol.txt"


@pytest.fixture
def sample_grid(sample_path: Path) -> Grid:
    return load_grid(sample_path)


@pytest.fixture
def looping_grid() -> Grid:
    return parse_grid(LOOPING_GRID)
