# display/__init__.py

from typing import Iterable, Optional, TextIO

from .terminal import DisplayTerminal
from .style import DisplayStyle

class Display:
    """
    Coordinates terminal display components.

    Component Hierarchy:
    DisplayTerminal (prompt, plain lines) + DisplayStyle (Rich messages)
    """
    def __init__(self, output: Optional[TextIO] = None, input: Optional[TextIO] = None,
                 prompt: str = "> ", show_prompt: bool = True,
                 error_style: str = "bold red"):
        """Initialize components in dependency order."""
        self.terminal = DisplayTerminal(output=output, input=input,
                                        prompt=prompt, show_prompt=show_prompt)
        self.style = DisplayStyle(output=output, error_style=error_style)

    def is_interactive(self) -> bool:
        return self.terminal.is_interactive()

    def read_line(self) -> Optional[str]:
        """Prompt for and return one raw command line, or None at end of input."""
        return self.terminal.read_line()

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write multiple lines to the display."""
        for line in lines:
            self.terminal.write_line(line)

    def write_error(self, message: str) -> None:
        """Write a single `error: <message>` line."""
        self.style.write_error(message)

    def write_banner(self, text: str) -> None:
        self.style.write_panel(text)

__all__ = ['Display']
