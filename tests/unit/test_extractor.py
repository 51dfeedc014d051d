"""Unit tests for border extraction."""

from provincemap.core.extractor import (
    extract_borders,
    extract_borders_parallel,
    merge_border_points,
    row_bands,
    world_position,
)
from provincemap.domain import Color, Point
from provincemap.io import RasterImage

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
SEA = (128, 128, 128)


def square_in_sea() -> RasterImage:
    """6x6 sea with a 4x4 red square at pixels 1..4."""
    rows = []
    for y in range(6):
        row = []
        for x in range(6):
            row.append(RED if 1 <= x <= 4 and 1 <= y <= 4 else SEA)
        rows.append(row)
    return RasterImage.from_rows(rows)


class TestWorldPosition:
    """Tests for pixel to world-space mapping."""

    def test_top_left_even_size(self):
        """Test that row 0 maps to the top of world space."""
        assert world_position(0, 0, 4, 4) == Point(-2.0, 2.0)

    def test_bottom_right_even_size(self):
        assert world_position(3, 3, 4, 4) == Point(1.0, -1.0)

    def test_odd_size_uses_integer_halving(self):
        """Test that width/2 and height/2 truncate."""
        assert world_position(1, 1, 3, 3) == Point(0.0, 1.0)
        assert world_position(0, 2, 3, 3) == Point(-1.0, 0.0)

    def test_y_axis_points_up(self):
        """Test that lower rows have smaller world Y."""
        top = world_position(5, 0, 10, 10)
        bottom = world_position(5, 9, 10, 10)
        assert top.y > bottom.y
        assert top.x == bottom.x


class TestExtractBorders:
    """Tests for extract_borders."""

    def test_single_color_without_sea_has_no_borders(self):
        """Test that a uniform image with no sea yields no border points."""
        image = RasterImage.from_rows([[RED] * 4] * 4)
        assert extract_borders(image) == {}

    def test_all_sea_has_no_borders(self):
        image = RasterImage.from_rows([[SEA] * 3] * 3)
        assert extract_borders(image) == {}

    def test_dot_in_sea(self):
        """Test that a one-pixel province yields exactly one border point."""
        image = RasterImage.from_rows([
            [SEA, SEA, SEA],
            [SEA, RED, SEA],
            [SEA, SEA, SEA],
        ])
        result = extract_borders(image)
        assert result == {Color(255, 0, 0): [Point(0.0, 1.0)]}

    def test_square_perimeter_only(self):
        """Test that interior pixels of a province are skipped."""
        result = extract_borders(square_in_sea())
        points = result[Color(255, 0, 0)]

        assert len(points) == 12
        # Interior pixels (2..3, 2..3) map to x in {-1, 0}, y in {0, 1}
        interior = {world_position(x, y, 6, 6) for x in (2, 3) for y in (2, 3)}
        assert interior.isdisjoint(points)

    def test_buckets_keyed_by_exact_color(self):
        """Test that every color gets its own bucket."""
        image = RasterImage.from_rows([
            [RED, BLUE],
            [GREEN, YELLOW],
        ])
        result = extract_borders(image)
        assert set(result) == {
            Color(*RED), Color(*BLUE), Color(*GREEN), Color(*YELLOW)
        }
        assert all(len(points) == 1 for points in result.values())

    def test_every_point_comes_from_its_color(self):
        """Test that points land in the bucket of their source pixel."""
        image = RasterImage.from_rows([[RED, RED, BLUE, BLUE]])
        result = extract_borders(image)
        assert result[Color(*RED)] == [world_position(1, 0, 4, 1)]
        assert result[Color(*BLUE)] == [world_position(2, 0, 4, 1)]

    def test_row_major_scan_order(self):
        """Test that bucket order follows the row-major scan."""
        points = extract_borders(square_in_sea())[Color(*RED)]
        assert points[0] == world_position(1, 1, 6, 6)
        assert points[-1] == world_position(4, 4, 6, 6)

    def test_row_band(self):
        """Test that a band only scans its rows but sees neighbors outside it."""
        image = square_in_sea()
        band = extract_borders(image, row_start=2, row_end=4)
        # Rows 2 and 3 contribute only their left and right edge pixels
        assert band[Color(*RED)] == [
            world_position(1, 2, 6, 6),
            world_position(4, 2, 6, 6),
            world_position(1, 3, 6, 6),
            world_position(4, 3, 6, 6),
        ]


class TestMergeAndParallel:
    """Tests for band merging and parallel extraction."""

    def test_row_bands(self):
        assert row_bands(10, 3) == [(0, 4), (4, 7), (7, 10)]
        assert row_bands(2, 5) == [(0, 1), (1, 2)]
        assert row_bands(0, 3) == []

    def test_merged_bands_match_full_scan(self):
        """Test that merging bands in order reproduces the serial result."""
        image = square_in_sea()
        parts = [extract_borders(image, start, end) for start, end in row_bands(6, 3)]
        assert merge_border_points(parts) == extract_borders(image)

    def test_merge_concatenates_same_color(self):
        red = Color(*RED)
        merged = merge_border_points([
            {red: [Point(0, 0)]},
            {red: [Point(1, 0)], Color(*BLUE): [Point(5, 5)]},
        ])
        assert merged[red] == [Point(0, 0), Point(1, 0)]
        assert merged[Color(*BLUE)] == [Point(5, 5)]

    def test_single_worker_runs_in_process(self):
        image = square_in_sea()
        assert extract_borders_parallel(image, max_workers=1) == extract_borders(image)

    def test_worker_processes_match_serial(self):
        """Test that process-pool extraction equals the serial scan."""
        image = square_in_sea()
        assert extract_borders_parallel(image, max_workers=2) == extract_borders(image)
