# test_raster.py

import pytest

from asciidraw.grid import Grid
from asciidraw.errors import InvalidDimensions, NotInitialized
from asciidraw.raster import (
    circle_points,
    line_points,
    rasterize_circle,
    rasterize_line,
    rasterize_rectangle,
    rectangle_points,
)


def lit_cells(grid):
    return {
        (x, y)
        for x in range(grid.width)
        for y in range(grid.height)
        if grid.cell(x, y) != grid.blank
    }


class TestLinePoints:
    def test_horizontal(self):
        assert list(line_points(1, 2, 5, 2)) == [(1, 2), (2, 2), (3, 2), (4, 2), (5, 2)]

    def test_vertical_downwards(self):
        assert list(line_points(3, 4, 3, 1)) == [(3, 4), (3, 3), (3, 2), (3, 1)]

    def test_degenerate_plots_single_point(self):
        assert list(line_points(7, 7, 7, 7)) == [(7, 7)]

    def test_diagonal(self):
        assert list(line_points(0, 0, 4, 4)) == [(i, i) for i in range(5)]

    def test_x_dominant_decisions(self):
        # pk starts at 2*2-6 = -2
        assert list(line_points(0, 0, 6, 2)) == [
            (0, 0), (1, 0), (2, 1), (3, 1), (4, 1), (5, 2), (6, 2)
        ]

    def test_y_dominant_is_transposed(self):
        forward = list(line_points(0, 0, 6, 2))
        assert list(line_points(0, 0, 2, 6)) == [(y, x) for x, y in forward]

    def test_ends_on_end_point(self):
        for end in [(9, 3), (-4, 7), (2, -8), (-5, -5), (0, 11)]:
            points = list(line_points(1, 1, *end))
            assert points[0] == (1, 1)
            assert points[-1] == end
            assert len(points) == max(abs(end[0] - 1), abs(end[1] - 1)) + 1

    def test_unit_steps(self):
        points = list(line_points(-3, 5, 8, -1))
        for (ax, ay), (bx, by) in zip(points, points[1:]):
            assert max(abs(bx - ax), abs(by - ay)) == 1

    @pytest.mark.parametrize("start,end", [((0, 0), (4, 4)), ((0, 3), (6, 3)), ((2, 0), (2, 5))])
    def test_endpoint_symmetry(self, start, end):
        assert set(line_points(*start, *end)) == set(line_points(*end, *start))


class TestCirclePoints:
    def test_radius_zero_degenerates_to_centre_and_diagonals(self):
        assert set(circle_points(4, 4, 0)) == {(4, 4), (3, 3), (3, 5), (5, 3), (5, 5)}

    def test_negative_radius_rejected(self):
        with pytest.raises(InvalidDimensions):
            list(circle_points(4, 4, -1))

    def test_radius_five_offsets(self):
        offsets = {(x - 10, y - 10) for x, y in circle_points(10, 10, 5)}
        expected = set()
        for a, b in [(0, 5), (1, 5), (2, 4), (3, 3)]:
            for sa in (1, -1):
                for sb in (1, -1):
                    expected.add((sa * a, sb * b))
                    expected.add((sb * b, sa * a))
        assert offsets == expected

    @pytest.mark.parametrize("radius", [1, 2, 3, 7, 12])
    def test_eightfold_symmetry(self, radius):
        offsets = {(x - 3, y + 2) for x, y in circle_points(3, -2, radius)}
        for dx, dy in offsets:
            for image in [(-dx, dy), (dx, -dy), (dy, dx), (-dy, -dx)]:
                assert image in offsets


class TestRectanglePoints:
    def test_forward_corners_give_box_outline(self):
        points = set(rectangle_points(1, 1, 4, 3))
        expected = {(x, y) for x in range(1, 5) for y in (1, 3)}
        expected |= {(x, y) for x in (1, 4) for y in range(1, 4)}
        assert points == expected

    def test_draw_order(self):
        points = list(rectangle_points(0, 0, 2, 1))
        assert points == [
            (0, 0), (1, 0), (2, 0),  # bottom
            (2, 0), (2, 1),          # right
            (2, 1), (1, 1), (0, 1),  # top
            (0, 1), (0, 0),          # left
        ]

    def test_reversed_corners_keep_derivation(self):
        # Derived corners are (4 + 3, 3) and (4, 3 + 2), not the bounding box
        points = set(rectangle_points(4, 3, 1, 1))
        assert (7, 3) in points
        assert (4, 5) in points
        assert (1, 3) not in points


class TestRasterizeOnGrid:
    def setup_method(self):
        self.grid = Grid()
        self.grid.initialize(20, 20)

    def test_requires_initialized_grid(self):
        grid = Grid()
        for call, args in [
            (rasterize_line, (0, 0, 3, 3)),
            (rasterize_circle, (5, 5, 2)),
            (rasterize_rectangle, (0, 0, 3, 3)),
        ]:
            with pytest.raises(NotInitialized):
                call(grid, *args)

    def test_offgrid_points_are_clipped(self):
        rasterize_line(self.grid, -5, -5, 25, 25)
        assert lit_cells(self.grid) == {(i, i) for i in range(20)}

    def test_circle_clipped_at_edge(self):
        rasterize_circle(self.grid, 0, 0, 3)
        assert lit_cells(self.grid) == {
            (x, y) for x, y in circle_points(0, 0, 3) if x >= 0 and y >= 0
        }

    def test_negative_radius_leaves_grid_untouched(self):
        with pytest.raises(InvalidDimensions):
            rasterize_circle(self.grid, 5, 5, -3)
        assert lit_cells(self.grid) == set()

    def test_line_both_directions_same_cells(self):
        rasterize_line(self.grid, 0, 0, 4, 4)
        forward = lit_cells(self.grid)
        self.grid.clear()
        rasterize_line(self.grid, 4, 4, 0, 0)
        assert lit_cells(self.grid) == forward
