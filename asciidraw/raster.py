# raster.py

"""
Integer rasterization of lines, circles and rectangles.

The `*_points` generators are pure: they only compute the cells a shape
covers and may yield points outside any grid. The `rasterize_*` functions
check the grid and funnel every point through `Grid.plot`, which drops
whatever falls off the surface.
"""

from typing import Iterable, Iterator, Tuple

from .errors import InvalidDimensions
from .grid import Grid

Point = Tuple[int, int]


def _sign(value: int) -> int:
    return 1 if value > 0 else -1 if value < 0 else 0


def line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """
    Bresenham's line algorithm.

    Yields the start point, then one point per unit step along the
    dominant axis until the end point is reached. The minor axis moves
    when the decision variable is non-negative.
    """
    yield x1, y1

    dx, dy = abs(x2 - x1), abs(y2 - y1)
    sx, sy = _sign(x2 - x1), _sign(y2 - y1)

    if dx > dy:
        pk = 2 * dy - dx
        for _ in range(dx):
            x1 += sx
            if pk < 0:
                pk += 2 * dy
            else:
                y1 += sy
                pk += 2 * dy - 2 * dx
            yield x1, y1
    else:
        # y-dominant: same walk with the axes transposed
        pk = 2 * dx - dy
        for _ in range(dy):
            y1 += sy
            if pk < 0:
                pk += 2 * dx
            else:
                x1 += sx
                pk += 2 * dx - 2 * dy
            yield x1, y1


def _octets(xc: int, yc: int, x: int, y: int) -> Iterator[Point]:
    yield xc + x, yc + y
    yield xc - x, yc + y
    yield xc + x, yc - y
    yield xc - x, yc - y
    yield xc + y, yc + x
    yield xc - y, yc + x
    yield xc + y, yc - x
    yield xc - y, yc - x


def circle_points(xc: int, yc: int, radius: int) -> Iterator[Point]:
    """
    Midpoint (Bresenham) circle generation with 8-way symmetry.

    Points repeat where octets meet; plotting is idempotent so duplicates
    are harmless.
    """
    if radius < 0:
        raise InvalidDimensions(f"Invalid radius `{radius}`")

    x, y, d = 0, radius, 3 - 2 * radius
    yield from _octets(xc, yc, x, y)

    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
        yield from _octets(xc, yc, x, y)


def rectangle_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """
    Four lines through (x1, y1), (x2, y2) and two derived corners.

    The derived corners are (x1 + |x2 - x1|, y1) and (x1, y1 + |y2 - y1|);
    sides are drawn bottom, right, top, left. When (x2, y2) lies below or
    left of (x1, y1) the result is not the bounding box of the two points.
    """
    right = x1 + abs(x2 - x1)
    top = y1 + abs(y2 - y1)

    yield from line_points(x1, y1, right, y1)
    yield from line_points(right, y1, x2, y2)
    yield from line_points(x2, y2, x1, top)
    yield from line_points(x1, top, x1, y1)


def _plot_all(grid: Grid, points: Iterable[Point]) -> None:
    for x, y in points:
        grid.plot(x, y)


def rasterize_line(grid: Grid, x1: int, y1: int, x2: int, y2: int) -> None:
    grid.require_initialized()
    _plot_all(grid, line_points(x1, y1, x2, y2))


def rasterize_circle(grid: Grid, xc: int, yc: int, radius: int) -> None:
    grid.require_initialized()
    _plot_all(grid, circle_points(xc, yc, radius))


def rasterize_rectangle(grid: Grid, x1: int, y1: int, x2: int, y2: int) -> None:
    grid.require_initialized()
    _plot_all(grid, rectangle_points(x1, y1, x2, y2))
