"""Console constants, text alignment and cursor control."""

from __future__ import annotations

import enum
import sys

BOX_CHAR = "-"
BOX_SIDE = "#"
BOX_WIDTH = 70

UP_ARROW = 72
DOWN_ARROW = 80
ENTER_KEY = 13
ESC_KEY = 27


class TextFormat(enum.IntEnum):
    """Horizontal alignment of a line of text inside a box."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


def move_cursor_sequence(x: int, y: int) -> str:
    """Return the ANSI escape sequence that moves the cursor to column x, row y."""
    return f"\033[{y};{x}H"


def move_cursor(x: int, y: int) -> None:
    """Move the terminal cursor to column x, row y."""
    sys.stdout.write(move_cursor_sequence(x, y))
    sys.stdout.flush()