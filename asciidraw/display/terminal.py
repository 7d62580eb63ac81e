# display/terminal.py
import sys
from typing import Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import Validator, ValidationError
from prompt_toolkit.formatted_text import FormattedText


class DisplayTerminal:
    """Low-level line I/O: the command prompt and plain text output."""

    def __init__(
        self,
        output: Optional[TextIO] = None,
        input: Optional[TextIO] = None,
        prompt: str = "> ",
        show_prompt: bool = True,
    ):
        """
        Args:
            output: Stream for drawings and messages. Defaults to stdout,
                resolved at write time.
            input: Stream commands are read from. Defaults to stdin.
            prompt: Text shown before each command.
            show_prompt: Whether to show the prompt at all.
        """
        self._output = output
        self._input = input
        self._prompt_prefix = prompt if show_prompt else ""
        self._prompt_session: Optional[PromptSession] = None

    class NonEmptyValidator(Validator):
        def validate(self, document):
            if not document.text.strip():
                raise ValidationError(message="", cursor_position=0)

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    @property
    def input(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    def is_interactive(self) -> bool:
        """Return True if commands are typed at a terminal."""
        try:
            return self.input.isatty()
        except (AttributeError, ValueError):
            return False

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to the output stream; append newline if requested."""
        try:
            self.output.write(text)
            if newline:
                self.output.write("\n")
            self.output.flush()
        except BrokenPipeError:
            pass  # Reader went away

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    def _prompt_interactive(self) -> str:
        if self._prompt_session is None:
            self._prompt_session = PromptSession(complete_while_typing=False)
        return self._prompt_session.prompt(
            FormattedText([("class:prompt", self._prompt_prefix)]),
            validator=self.NonEmptyValidator(),
            validate_while_typing=False,
        )

    def read_line(self) -> Optional[str]:
        """
        Show the prompt and read one line of input.

        Returns:
            The line without its trailing newline, or None once input is
            exhausted (end of file or Ctrl-D).
        """
        if self.is_interactive():
            try:
                return self._prompt_interactive()
            except EOFError:
                return None

        self.write(self._prompt_prefix)
        line = self.input.readline()
        if not line:
            # Keep the transcript tidy when the last prompt got no answer
            if self._prompt_prefix:
                self.write_line()
            return None
        return line.rstrip("\r\n")
