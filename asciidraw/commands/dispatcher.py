# commands/dispatcher.py

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..errors import DrawError, InvalidArguments, UnrecognizedCommand
from ..grid import Grid
from ..raster import rasterize_circle, rasterize_line, rasterize_rectangle
from .model import Command, CommandKind


# Kinds that need an initialized grid before anything else is checked.
REQUIRES_GRID = frozenset({
    CommandKind.CIRCLE,
    CommandKind.CLEAR,
    CommandKind.DISPLAY,
    CommandKind.LINE,
    CommandKind.POINT,
    CommandKind.RECTANGLE,
})


# Kinds whose arguments are coordinates or a radius.
DRAWING = frozenset({
    CommandKind.CIRCLE,
    CommandKind.LINE,
    CommandKind.POINT,
    CommandKind.RECTANGLE,
})


class DispatchResult(Enum):
    """Signal returned to the session after each command."""
    CONTINUE = "continue"
    TERMINATE = "terminate"


class Dispatcher:
    """
    Associates each command kind with its grid or rasterizer operation.

    Errors raised by an operation are reported through the display as
    `error: <message>` and never end the session; only END does.
    """

    def __init__(self, grid: Grid, display, logger=None, coordinate_limit: Optional[int] = None):
        """
        Args:
            grid: The session's grid.
            display: Anything with `write_lines(lines)` and `write_error(message)`.
            logger: Optional Logger for command tracing.
            coordinate_limit: Largest accepted magnitude for a coordinate or
                radius. Line and circle walks take time proportional to it.
        """
        self.grid = grid
        self.display = display
        self.logger = logger
        self.coordinate_limit = coordinate_limit
        self._handlers: Dict[CommandKind, Callable[[Tuple[int, ...]], DispatchResult]] = {
            CommandKind.CHAR: self._char,
            CommandKind.CIRCLE: self._circle,
            CommandKind.CLEAR: self._clear,
            CommandKind.DISPLAY: self._display,
            CommandKind.END: self._end,
            CommandKind.GRID: self._grid,
            CommandKind.LINE: self._line,
            CommandKind.POINT: self._point,
            CommandKind.RECTANGLE: self._rectangle,
        }

    def dispatch(self, command: Command) -> DispatchResult:
        """Evaluate one command and tell the session whether to keep going."""
        if self.logger:
            self.logger.debug(f"Dispatching {command.kind.name} {list(command.args)}")
        try:
            if command.kind is CommandKind.INVALID:
                raise UnrecognizedCommand(command.name)
            if command.kind in REQUIRES_GRID:
                self.grid.require_initialized()
            if len(command.args) < command.arity:
                raise InvalidArguments(
                    f"`{command.name}` expects {command.arity} argument(s), got {len(command.args)}"
                )
            args = command.args[:command.arity]
            if command.kind in DRAWING:
                self._check_range(args)
            return self._handlers[command.kind](args)
        except DrawError as e:
            self.report(e)
            return DispatchResult.CONTINUE

    def report(self, error: DrawError) -> None:
        """Write a recoverable error to the display."""
        if self.logger:
            self.logger.warning(f"{type(error).__name__}: {error.message}")
        self.display.write_error(error.message)

    def _check_range(self, args) -> None:
        if self.coordinate_limit is None:
            return
        for value in args:
            if abs(value) > self.coordinate_limit:
                raise InvalidArguments(
                    f"Argument `{value}` out of range (limit {self.coordinate_limit})"
                )

    def _char(self, args) -> DispatchResult:
        (code,) = args
        if not 0 <= code < 0x110000 or not chr(code).isprintable():
            raise InvalidArguments(f"Invalid character code `{code}`")
        self.grid.set_draw_color(chr(code))
        return DispatchResult.CONTINUE

    def _circle(self, args) -> DispatchResult:
        rasterize_circle(self.grid, *args)
        return DispatchResult.CONTINUE

    def _clear(self, args) -> DispatchResult:
        self.grid.clear()
        return DispatchResult.CONTINUE

    def _display(self, args) -> DispatchResult:
        self.display.write_lines(self.grid.render())
        return DispatchResult.CONTINUE

    def _end(self, args) -> DispatchResult:
        return DispatchResult.TERMINATE

    def _grid(self, args) -> DispatchResult:
        self.grid.initialize(*args)
        return DispatchResult.CONTINUE

    def _line(self, args) -> DispatchResult:
        rasterize_line(self.grid, *args)
        return DispatchResult.CONTINUE

    def _point(self, args) -> DispatchResult:
        self.grid.plot(*args)
        return DispatchResult.CONTINUE

    def _rectangle(self, args) -> DispatchResult:
        rasterize_rectangle(self.grid, *args)
        return DispatchResult.CONTINUE
