"""
Tests for the toroidal 8x8 bit grid.
"""

import pytest

from bitgrid import BitGrid, rotate_right_64, rotate_right_8
from omino_types import Point, Vector


# =============================================================================
# Test Bit Rotation Helpers
# =============================================================================


class TestRotation:
    """Tests for the 8-bit and 64-bit rotation helpers."""

    def test_rotate_8_moves_low_bit_to_high(self) -> None:
        """Bits falling off the low end reappear at the high end."""
        assert rotate_right_8(0b0000_0001, 1) == 0b1000_0000

    def test_rotate_8_by_zero_and_eight(self) -> None:
        """Rotation by 0 or 8 leaves the value unchanged."""
        assert rotate_right_8(0b1010_0110, 0) == 0b1010_0110
        assert rotate_right_8(0b1010_0110, 8) == 0b1010_0110

    def test_rotate_8_negative(self) -> None:
        """Negative rotation rotates left."""
        assert rotate_right_8(0b1000_0000, -1) == 0b0000_0001

    def test_rotate_64_wraps(self) -> None:
        """A full-width rotation wraps the low byte to the top."""
        assert rotate_right_64(0xFF, 8) == 0xFF << 56
        assert rotate_right_64(0xFF, 64) == 0xFF


# =============================================================================
# Test Set / Get
# =============================================================================


class TestSetGet:
    """Tests for point membership."""

    def test_empty_grid(self) -> None:
        """A new grid has no occupied cells."""
        grid = BitGrid()
        assert grid.bits == 0
        assert grid.count() == 0
        assert not grid.get(Point(0, 0))

    def test_origin_is_most_significant_bit(self) -> None:
        """Row 0, column 0 is the top bit of the word."""
        assert BitGrid().set(Point(0, 0)).bits == 1 << 63

    def test_last_cell_is_least_significant_bit(self) -> None:
        """Row 7, column 7 is the bottom bit of the word."""
        assert BitGrid().set(Point(7, 7)).bits == 1

    def test_row_major_layout(self) -> None:
        """Moving down one row moves eight bits toward the low end."""
        assert BitGrid().set(Point(0, 1)).bits == 1 << 55
        assert BitGrid().set(Point(1, 0)).bits == 1 << 62

    def test_set_then_get(self) -> None:
        """A set cell reads back as occupied; others stay empty."""
        grid = BitGrid().set(Point(3, 5))
        assert grid.get(Point(3, 5))
        assert not grid.get(Point(5, 3))

    def test_set_is_idempotent(self) -> None:
        """Setting the same cell twice changes nothing."""
        once = BitGrid().set(Point(2, 2))
        assert once.set(Point(2, 2)) == once

    def test_set_returns_new_grid(self) -> None:
        """The original grid is not modified."""
        grid = BitGrid()
        grid.set(Point(1, 1))
        assert grid.bits == 0

    @pytest.mark.parametrize(
        "alias, cell",
        [
            (Point(-1, -1), Point(7, 7)),
            (Point(8, 0), Point(0, 0)),
            (Point(-8, 9), Point(0, 1)),
            (Point(15, -3), Point(7, 5)),
        ],
    )
    def test_coordinates_wrap(self, alias: Point, cell: Point) -> None:
        """Coordinates are reduced modulo 8 on both axes."""
        grid = BitGrid().set(alias)
        assert grid == BitGrid().set(cell)
        assert grid.get(cell)
        assert grid.get(alias)

    def test_from_points(self) -> None:
        """from_points matches repeated set calls."""
        points = [Point(0, 0), Point(1, 0), Point(1, 1)]
        expected = BitGrid().set(points[0]).set(points[1]).set(points[2])
        assert BitGrid.from_points(points) == expected
        assert expected.count() == 3

    def test_cells_row_major(self) -> None:
        """cells() yields occupied cells row by row, left to right."""
        grid = BitGrid.from_points([Point(2, 1), Point(0, 1), Point(5, 0)])
        assert list(grid.cells()) == [Point(5, 0), Point(0, 1), Point(2, 1)]


# =============================================================================
# Test Translate
# =============================================================================


class TestTranslate:
    """Tests for cyclic translation."""

    @pytest.mark.parametrize(
        "start, vec, end",
        [
            (Point(0, 0), Vector(1, 0), Point(1, 0)),
            (Point(0, 0), Vector(0, 1), Point(0, 1)),
            (Point(0, 0), Vector(-1, 0), Point(7, 0)),
            (Point(0, 0), Vector(0, -1), Point(0, 7)),
            (Point(6, 6), Vector(3, 5), Point(1, 3)),
            (Point(4, 2), Vector(0, 0), Point(4, 2)),
        ],
    )
    def test_translate_single_cell(self, start: Point, vec: Vector, end: Point) -> None:
        """A single cell moves by the vector with wrap-around."""
        grid = BitGrid().set(start).translate(vec)
        assert grid == BitGrid().set(end)

    def test_translate_moves_whole_pattern(self) -> None:
        """Every cell of a pattern moves together."""
        points = [Point(7, 0), Point(0, 0), Point(0, 7), Point(3, 4)]
        vec = Vector(2, -3)
        moved = BitGrid.from_points(points).translate(vec)
        assert moved == BitGrid.from_points(p + vec for p in points)
        assert moved.count() == len(points)

    def test_translate_by_full_turn_is_identity(self) -> None:
        """Multiples of 8 on either axis leave the grid unchanged."""
        grid = BitGrid.from_points([Point(1, 2), Point(2, 2), Point(2, 3)])
        assert grid.translate(Vector(8, -16)) == grid

    @pytest.mark.parametrize(
        "vec",
        [Vector(1, 0), Vector(0, 1), Vector(-3, 2), Vector(5, -7), Vector(13, 21), Vector(-9, -1)],
    )
    def test_translate_inverse_restores_grid(self, vec: Vector) -> None:
        """Translating by v then -v is the identity."""
        grid = BitGrid.from_points(
            [Point(0, 0), Point(1, 0), Point(7, 3), Point(4, 7), Point(2, 5)]
        )
        assert grid.translate(vec).translate(-vec) == grid


# =============================================================================
# Test Ordering
# =============================================================================


class TestCompare:
    """Tests for the total order over grids."""

    def test_compare_equal(self) -> None:
        """Identical patterns compare as zero."""
        a = BitGrid().set(Point(1, 1))
        b = BitGrid().set(Point(1, 1))
        assert a.compare(b) == 0
        assert a == b
        assert hash(a) == hash(b)

    def test_compare_earlier_cell_is_greater(self) -> None:
        """A cell earlier in row-major order carries a higher bit."""
        first = BitGrid().set(Point(0, 0))
        later = BitGrid().set(Point(1, 0))
        assert first.compare(later) == 1
        assert later.compare(first) == -1
        assert later < first

    def test_sorting_follows_packed_value(self) -> None:
        """sorted() orders grids by their packed integer."""
        grids = [BitGrid().set(Point(x, 0)) for x in range(4)]
        assert sorted(grids) == list(reversed(grids))
