# commands/__init__.py

from .model import ARGS_MAX, ARITY, Command, CommandKind
from .parser import parse_argument, parse_command
from .dispatcher import Dispatcher, DispatchResult

__all__ = [
    "ARGS_MAX",
    "ARITY",
    "Command",
    "CommandKind",
    "Dispatcher",
    "DispatchResult",
    "parse_argument",
    "parse_command",
]
