# commands/model.py

from enum import Enum
from dataclasses import dataclass, field
from typing import Tuple

# The maximum number of arguments a command can take.
ARGS_MAX = 4


class CommandKind(Enum):
    """Every command the interpreter can evaluate."""
    CHAR = "CHAR"
    CIRCLE = "CIRCLE"
    CLEAR = "CLEAR"
    DISPLAY = "DISPLAY"
    END = "END"
    GRID = "GRID"
    LINE = "LINE"
    POINT = "POINT"
    RECTANGLE = "RECTANGLE"
    INVALID = "INVALID"

    @classmethod
    def from_name(cls, name: str) -> "CommandKind":
        """Match a command name exactly; unknown names map to INVALID."""
        try:
            return cls(name)
        except ValueError:
            return cls.INVALID


# Number of positional arguments each kind consumes.
ARITY = {
    CommandKind.CHAR: 1,
    CommandKind.CIRCLE: 3,
    CommandKind.CLEAR: 0,
    CommandKind.DISPLAY: 0,
    CommandKind.END: 0,
    CommandKind.GRID: 2,
    CommandKind.LINE: 4,
    CommandKind.POINT: 2,
    CommandKind.RECTANGLE: 4,
    CommandKind.INVALID: 0,
}


@dataclass(frozen=True)
class Command:
    """
    One parsed instruction.

    `name` keeps the token as typed, for error messages; `args` holds up to
    ARGS_MAX integers in the order they appeared.
    """
    name: str
    kind: CommandKind
    args: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def arity(self) -> int:
        return ARITY[self.kind]
