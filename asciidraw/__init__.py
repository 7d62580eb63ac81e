# __init__.py

from .config import SessionSettings
from .errors import (
    AlreadyInitialized,
    DrawError,
    InvalidArguments,
    InvalidDimensions,
    NotInitialized,
    UnrecognizedCommand,
)
from .grid import Grid
from .logger import Logger
from .interface import Interface

__all__ = [
    "AlreadyInitialized",
    "DrawError",
    "Grid",
    "Interface",
    "InvalidArguments",
    "InvalidDimensions",
    "Logger",
    "NotInitialized",
    "SessionSettings",
    "UnrecognizedCommand",
]
