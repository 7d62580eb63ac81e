# commands/parser.py

import re
from typing import List, Optional

from ..errors import InvalidArguments
from .model import ARGS_MAX, Command, CommandKind

_INTEGER = re.compile(r"-?[0-9]+")


def parse_argument(token: str) -> int:
    """
    Convert one argument token to an integer.

    Decimal numerals (optionally negative) are parsed as integers; any other
    single character becomes its character code, which is how CHAR receives
    a draw color.
    """
    if _INTEGER.fullmatch(token):
        return int(token)
    if len(token) == 1:
        return ord(token)
    raise InvalidArguments(f"Invalid argument `{token}`")


def parse_arguments(tokens: List[str]) -> tuple:
    """Split whitespace tokens on commas and convert each piece, left to right."""
    args = []
    for token in tokens:
        for piece in token.split(","):
            if not piece:
                continue
            args.append(parse_argument(piece))
            if len(args) > ARGS_MAX:
                raise InvalidArguments(f"Too many arguments (maximum {ARGS_MAX})")
    return tuple(args)


def parse_command(line: str) -> Optional[Command]:
    """
    Tokenize a raw input line into a Command.

    Returns:
        The parsed command, or None for a blank line.

    Raises:
        InvalidArguments: if an argument cannot be converted or there are
            more than ARGS_MAX of them.
    """
    tokens = line.split()
    if not tokens:
        return None

    name, rest = tokens[0], tokens[1:]
    kind = CommandKind.from_name(name)
    if kind is CommandKind.INVALID:
        return Command(name=name, kind=kind)
    return Command(name=name, kind=kind, args=parse_arguments(rest))
