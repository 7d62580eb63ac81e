# session.py

from enum import Enum
from typing import Optional

from .commands import Dispatcher, DispatchResult, parse_command
from .config import SessionSettings
from .errors import DrawError
from .grid import Grid


class SessionState(Enum):
    AWAITING_COMMAND = "awaiting_command"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


class Session:
    """
    The interpreter loop.

    Owns the one Grid of the session and feeds it one command at a time,
    each fully resolved before the next line is read. The loop ends on END
    or when the display runs out of input.
    """

    def __init__(self, display, settings: Optional[SessionSettings] = None, logger=None):
        self.display = display
        self.settings = settings or SessionSettings()
        self.logger = logger
        self.grid = Grid(
            draw_color=self.settings.draw_color,
            blank=self.settings.blank,
            max_dimension=self.settings.max_dimension,
        )
        self.dispatcher = Dispatcher(
            self.grid, display, logger=logger,
            coordinate_limit=self.settings.coordinate_limit,
        )
        self.state = SessionState.AWAITING_COMMAND

    def execute(self, line: str) -> DispatchResult:
        """Tokenize and evaluate one raw input line."""
        if self.state is SessionState.TERMINATED:
            return DispatchResult.TERMINATE
        self.state = SessionState.DISPATCHING
        try:
            try:
                command = parse_command(line)
            except DrawError as e:
                self.dispatcher.report(e)
                return DispatchResult.CONTINUE
            if command is None:
                return DispatchResult.CONTINUE
            result = self.dispatcher.dispatch(command)
        finally:
            self.state = SessionState.AWAITING_COMMAND

        if result is DispatchResult.TERMINATE:
            self.state = SessionState.TERMINATED
        return result

    def run(self) -> None:
        """Read and evaluate commands until END or end of input."""
        if self.logger:
            self.logger.debug("Session started")
        while self.state is not SessionState.TERMINATED:
            line = self.display.read_line()
            if line is None:
                if self.logger:
                    self.logger.debug("Input exhausted, ending session")
                self.state = SessionState.TERMINATED
                break
            self.execute(line)
        if self.logger:
            self.logger.debug("Session terminated")
