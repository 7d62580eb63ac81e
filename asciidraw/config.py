# config.py

from dataclasses import dataclass


@dataclass
class SessionSettings:
    """Settings shared by the display, grid and session."""

    prompt: str = "> "
    show_prompt: bool = True
    draw_color: str = "*"
    blank: str = " "
    max_dimension: int = 1000
    coordinate_limit: int = 100_000
    error_style: str = "bold red"
