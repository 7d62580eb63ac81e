# grid.py

from typing import List, Optional

from .errors import AlreadyInitialized, InvalidDimensions, NotInitialized

# Label digits wrap every ten rows, counting down from nine.
LABEL_WRAP = 10


def ruler_digit(index: int) -> str:
    """Return the ruler label for a display row or column."""
    return str((9 - index) % LABEL_WRAP)


class Grid:
    """
    The drawing surface: a width x height buffer of single characters.

    A grid starts without backing storage and is allocated exactly once by
    `initialize`. Cells are addressed as (x, y) with 0 <= x < width and
    0 <= y < height; `plot` silently drops anything outside that range so
    rasterizers may compute off-grid points freely.
    """

    def __init__(self, draw_color: str = "*", blank: str = " ", max_dimension: Optional[int] = None):
        self.width = 0
        self.height = 0
        self.draw_color = draw_color
        self.blank = blank
        self.max_dimension = max_dimension
        self._cells: Optional[List[List[str]]] = None

    @property
    def initialized(self) -> bool:
        return self._cells is not None

    def initialize(self, width: int, height: int) -> None:
        """
        Allocate the buffer and fill it with the blank character.

        Raises:
            AlreadyInitialized: if the grid already has storage.
            InvalidDimensions: if either dimension is not positive or is
                above the configured maximum.
        """
        if self.initialized:
            raise AlreadyInitialized()
        if width <= 0 or height <= 0 or (
            self.max_dimension is not None and max(width, height) > self.max_dimension
        ):
            raise InvalidDimensions(f"Invalid dimensions `{width}`x`{height}`")

        # Column-major: one list per x, each scanning the height.
        self._cells = [[self.blank] * height for _ in range(width)]
        self.width = width
        self.height = height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int) -> None:
        """Write the draw color into (x, y); out-of-bounds points are ignored."""
        if self._cells is None or not self.in_bounds(x, y):
            return
        self._cells[x][y] = self.draw_color

    def cell(self, x: int, y: int) -> str:
        self.require_initialized()
        return self._cells[x][y]

    def clear(self) -> None:
        """Reset every cell to the blank character, keeping the allocation."""
        self.require_initialized()
        for column in self._cells:
            column[:] = [self.blank] * self.height

    def set_draw_color(self, value: str) -> None:
        self.draw_color = value

    def require_initialized(self) -> None:
        if not self.initialized:
            raise NotInitialized()

    def render(self) -> List[str]:
        """
        Render the grid as text, one line per y plus a ruler line.

        Row `i` shows the cells (x, y=i) for every x, prefixed by its ruler
        digit and a space; the last line is the ruler for the x columns,
        prefixed by a single space. A square grid gives `width + 1` lines;
        a non-square grid gives `height + 1` lines of `width` cells each.

        Returns:
            The rendered lines, without trailing newlines.
        """
        self.require_initialized()
        lines = [
            f"{ruler_digit(y)} {''.join(column[y] for column in self._cells)}"
            for y in range(self.height)
        ]
        lines.append(" " + "".join(ruler_digit(x) for x in range(self.width)))
        return lines
