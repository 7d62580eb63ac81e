# display/style.py

from typing import Optional, TextIO

from rich.text import Text
from rich.panel import Panel
from rich.align import Align
from rich.console import Console


class DisplayStyle:
    """
    Formats messages around the drawing output with Rich.

    The console writes to the terminal's output stream. On anything that is
    not a terminal Rich emits plain text, so error lines stay exactly
    `error: <message>`.
    """
    def __init__(self, output: Optional[TextIO] = None, error_style: str = "bold red"):
        """
        Args:
            output: Stream shared with the terminal; None follows stdout
            error_style: Rich style applied to error lines
        """
        self.error_style = error_style
        self.console = Console(file=output, highlight=False, emoji=False)

    def format_error(self, message: str) -> Text:
        """Build the styled `error: <message>` line."""
        return Text(f"error: {message}", style=self.error_style)

    def write_error(self, message: str) -> None:
        self.console.print(self.format_error(message), soft_wrap=True)

    def write_panel(self, text: str, title: str = "asciidraw") -> None:
        """Write text inside a Rich panel, used for the interactive banner."""
        self.console.print(
            Panel(
                Align.left(text.rstrip()),
                title=title,
                title_align="right",
                border_style="dim yellow",
                padding=(0, 1),
                expand=False,
            )
        )
