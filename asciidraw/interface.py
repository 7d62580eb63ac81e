# interface.py

from typing import Optional, TextIO

from .logger import Logger
from .config import SessionSettings
from .display import Display
from .session import Session

BANNER = (
    "GRID w,h  POINT x,y  LINE x1,y1 x2,y2  CIRCLE x,y,r\n"
    "RECTANGLE x1,y1 x2,y2  CHAR c  CLEAR  DISPLAY  END"
)

class Interface:
    """
    Main entry point that assembles our Display and Session.
    """

    def __init__(self, settings: Optional[SessionSettings] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 output: Optional[TextIO] = None,
                 input: Optional[TextIO] = None):
        """
        Initialize components with optional settings and logging.

        Args:
            settings: Prompt, colors and limits. Defaults to SessionSettings().
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            output: Stream for drawings and errors. Defaults to stdout.
            input: Stream commands are read from. Defaults to stdin.
        """
        self.settings = settings or SessionSettings()
        self._init_components(logging_enabled, log_file, output, input)

    def _init_components(self, logging_enabled: bool,
                         log_file: Optional[str],
                         output: Optional[TextIO],
                         input: Optional[TextIO]) -> None:
        self.logger = Logger(__name__, logging_enabled, log_file)

        self.display = Display(
            output=output,
            input=input,
            prompt=self.settings.prompt,
            show_prompt=self.settings.show_prompt,
            error_style=self.settings.error_style,
        )
        self.session = Session(self.display, settings=self.settings, logger=self.logger)
        self.logger.debug(f"Initialized with settings: {self.settings}")

    def execute(self, line: str):
        """Evaluate a single command line without reading input."""
        return self.session.execute(line)

    def start(self) -> None:
        """
        Run the interpreter until END or end of input.

        An interactive session opens with a short command summary; Ctrl-C
        leaves the loop cleanly.
        """
        if self.display.is_interactive():
            self.display.write_banner(BANNER)
        try:
            self.session.run()
        except KeyboardInterrupt:
            self.display.terminal.write_line("\nExiting...")
            self.logger.debug("Interrupted by user")
        finally:
            self.logger.close()
