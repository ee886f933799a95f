"""ANSI escape sequences for coloured terminal text."""

from enum import IntEnum

__all__ = ["Color", "COLOR_LIST", "tcolor"]


class Color(IntEnum):
    """SGR codes: foreground colours and text modifiers."""

    REGULAR = 0
    BOLD = 1
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


COLOR_LIST: tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
    Color.BRIGHT_RED,
    Color.BRIGHT_GREEN,
    Color.BRIGHT_YELLOW,
    Color.BRIGHT_BLUE,
    Color.BRIGHT_MAGENTA,
    Color.BRIGHT_CYAN,
    Color.BRIGHT_WHITE,
)


def tcolor(msg: str, color: int = Color.WHITE, modifier: int = Color.REGULAR) -> str:
    """Return *msg* wrapped in escape codes for *color* and *modifier*."""
    return f"\033[{int(modifier)};{int(color)}m{msg}\033[0m"