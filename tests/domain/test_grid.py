"""Tests for guard_patrol.domain.grid module."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from guard_patrol.domain.direction import Direction
from guard_patrol.domain.errors import InvalidObstructionError, OutOfBoundsError
from guard_patrol.domain.grid import Cell, Grid
from guard_patrol.io.loader import parse_grid


class TestCell:
    def test_agent_cells_carry_direction(self) -> None:
        assert Cell.AGENT_UP.direction is Direction.UP
        assert Cell.AGENT_LEFT.direction is Direction.LEFT
        assert Cell.OPEN.direction is None
        assert Cell.BLOCKED.direction is None

    def test_agent_constructor_round_trips(self) -> None:
        for direction in Direction:
            assert Cell.agent(direction).direction is direction

    def test_chars(self) -> None:
        assert [c.char for c in Cell] == [".", "#", "^", ">", "v", "<"]


class TestGridConstruction:
    def test_dimensions(self) -> None:
        grid = parse_grid("...\n.^.\n")
        assert (grid.rows, grid.cols) == (2, 3)

    def test_from_rows_rejects_ragged(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            Grid.from_rows([[Cell.OPEN, Cell.OPEN], [Cell.OPEN]])

    def test_rejects_empty_array(self) -> None:
        with pytest.raises(ValueError, match="at least 1x1"):
            Grid(cells=np.zeros((0, 3), dtype=np.int8))

    def test_cells_are_read_only(self) -> None:
        grid = parse_grid("..\n^.\n")
        with pytest.raises(ValueError):
            grid.cells[0, 0] = Cell.BLOCKED

    def test_caller_array_is_not_frozen_or_shared(self) -> None:
        source = np.array([[Cell.OPEN, Cell.AGENT_UP]], dtype=np.int8)
        grid = Grid(cells=source)
        assert source.flags.writeable
        source[0, 0] = Cell.BLOCKED
        assert grid.at((0, 0)) is Cell.OPEN
        assert not grid.cells.flags.writeable

    def test_equality_compares_contents(self) -> None:
        assert parse_grid(".#\n^.\n") == parse_grid(".#\n^.\n")
        assert parse_grid(".#\n^.\n") != parse_grid("..\n^.\n")


class TestGridQueries:
    def test_at_returns_typed_cell(self) -> None:
        grid = parse_grid("#.\n.>\n")
        assert grid.at((0, 0)) is Cell.BLOCKED
        assert grid.at((0, 1)) is Cell.OPEN
        assert grid.at((1, 1)) is Cell.AGENT_RIGHT

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (2, 0), (0, 2)])
    def test_at_out_of_bounds(self, pos: tuple[int, int]) -> None:
        grid = parse_grid("..\n.^\n")
        with pytest.raises(OutOfBoundsError):
            grid.at(pos)

    def test_out_of_bounds_is_an_index_error(self) -> None:
        grid = parse_grid("^\n")
        with pytest.raises(IndexError):
            grid.at((5, 5))

    def test_is_edge(self) -> None:
        grid = parse_grid("....\n.^..\n....\n....\n")
        assert grid.is_edge((0, 2))
        assert grid.is_edge((3, 1))
        assert grid.is_edge((2, 0))
        assert grid.is_edge((1, 3))
        assert not grid.is_edge((1, 1))
        assert not grid.is_edge((2, 2))

    def test_every_cell_of_single_row_is_edge(self) -> None:
        grid = parse_grid("..^..\n")
        assert all(grid.is_edge((0, col)) for col in range(5))

    def test_find_start(self, sample_grid: Grid) -> None:
        assert sample_grid.find_start() == ((6, 4), Direction.UP)

    def test_find_start_absent(self) -> None:
        assert parse_grid("..\n.#\n").find_start() is None

    def test_open_positions_row_major(self) -> None:
        grid = parse_grid("#.\n.^\n")
        assert list(grid.open_positions()) == [(0, 1), (1, 0)]

    def test_to_lines_round_trip(self, sample_grid: Grid, sample_path: Path) -> None:
        assert sample_grid.to_lines() == sample_path.read_text().splitlines()


class TestWithBlocked:
    def test_blocks_only_target(self) -> None:
        grid = parse_grid("...\n.^.\n...\n")
        blocked = grid.with_blocked((0, 2))
        assert blocked.at((0, 2)) is Cell.BLOCKED
        assert blocked.count(Cell.BLOCKED) == 1
        assert blocked.count(Cell.OPEN) == grid.count(Cell.OPEN) - 1

    def test_original_untouched(self) -> None:
        grid = parse_grid("...\n.^.\n...\n")
        grid.with_blocked((0, 0))
        assert grid.at((0, 0)) is Cell.OPEN

    def test_copies_are_independent(self) -> None:
        grid = parse_grid("...\n.^.\n...\n")
        first = grid.with_blocked((0, 0))
        second = grid.with_blocked((2, 2))
        assert first.at((2, 2)) is Cell.OPEN
        assert second.at((0, 0)) is Cell.OPEN

    def test_rejects_already_blocked(self) -> None:
        grid = parse_grid("#.\n.^\n")
        with pytest.raises(InvalidObstructionError, match="already blocked"):
            grid.with_blocked((0, 0))

    def test_rejects_start_cell(self) -> None:
        grid = parse_grid("#.\n.^\n")
        with pytest.raises(InvalidObstructionError, match="agent start"):
            grid.with_blocked((1, 1))

    def test_rejects_out_of_bounds(self) -> None:
        grid = parse_grid("#.\n.^\n")
        with pytest.raises(OutOfBoundsError):
            grid.with_blocked((2, 0))
