"""Presentation settings shared by every registry in the process."""

from __future__ import annotations

from typing_extensions import Literal

AccentColor = Literal[
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "light_grey",
    "dark_grey",
    "light_red",
    "light_green",
    "light_yellow",
    "light_blue",
    "light_magenta",
    "light_cyan",
]

ACCENT_COLOR: AccentColor | None = None

HELP_WIDTH: int = 70
"""Column at which flag descriptions in the help text are wrapped."""


def set_accent_color(accent_color: AccentColor | None) -> None:
    """Set an accent color to use for flag names in help messages. `None` keeps
    flag names in the default terminal color (bold only)."""
    global ACCENT_COLOR
    ACCENT_COLOR = accent_color


def set_help_width(width: int) -> None:
    """Set the column at which help text is wrapped."""
    global HELP_WIDTH
    if width < 20:
        raise ValueError(f"Help width must be at least 20 columns, got {width}.")
    HELP_WIDTH = width
