"""Tests for guard_patrol.domain.direction module."""

from __future__ import annotations

import pytest

from guard_patrol.domain.direction import Direction


class TestTurnRight:
    def test_clockwise_order(self) -> None:
        assert Direction.UP.turn_right() is Direction.RIGHT
        assert Direction.RIGHT.turn_right() is Direction.DOWN
        assert Direction.DOWN.turn_right() is Direction.LEFT
        assert Direction.LEFT.turn_right() is Direction.UP

    @pytest.mark.parametrize("direction", list(Direction))
    def test_period_is_four(self, direction: Direction) -> None:
        turned = direction
        for _ in range(4):
            turned = turned.turn_right()
        assert turned is direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_fewer_than_four_turns_never_return(self, direction: Direction) -> None:
        turned = direction
        for _ in range(3):
            turned = turned.turn_right()
            assert turned is not direction


class TestDisplacement:
    def test_unit_vectors(self) -> None:
        assert Direction.UP.displacement == (-1, 0)
        assert Direction.RIGHT.displacement == (0, 1)
        assert Direction.DOWN.displacement == (1, 0)
        assert Direction.LEFT.displacement == (0, -1)

    def test_advance_may_leave_grid(self) -> None:
        assert Direction.UP.advance((0, 3)) == (-1, 3)
        assert Direction.LEFT.advance((2, 0)) == (2, -1)

    def test_opposite_directions_cancel(self) -> None:
        start = (4, 4)
        assert Direction.DOWN.advance(Direction.UP.advance(start)) == start
        assert Direction.LEFT.advance(Direction.RIGHT.advance(start)) == start


class TestMarkers:
    @pytest.mark.parametrize(
        ("marker", "expected"),
        [("^", Direction.UP), (">", Direction.RIGHT), ("v", Direction.DOWN), ("<", Direction.LEFT)],
    )
    def test_from_marker(self, marker: str, expected: Direction) -> None:
        assert Direction.from_marker(marker) is expected
        assert expected.marker == marker

    def test_unknown_marker_rejected(self) -> None:
        with pytest.raises(ValueError, match="not an agent marker"):
            Direction.from_marker("x")
