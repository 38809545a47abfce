"""Single-line text output framed by box sides."""

from __future__ import annotations

import sys

from matrixcalc.console import BOX_SIDE, BOX_WIDTH, TextFormat


def format_text(text: str, external_call: bool, fmt: TextFormat) -> str:
    """Return a box line holding text aligned by fmt.

    With external_call the box sides are replaced by spaces. Text longer
    than the box gets no padding at all.
    """
    length = len(text)
    edge = " " if external_call else BOX_SIDE
    free = BOX_WIDTH - length - 2

    if fmt == TextFormat.LEFT:
        body = " " + text + " " * max(free - 1, 0)
    elif fmt == TextFormat.RIGHT:
        body = " " * max(free - 1, 0) + text + " "
    elif fmt == TextFormat.CENTER:
        left = max(free, 0) // 2
        right = left + max(free, 0) % 2
        body = " " * left + text + " " * right
    else:
        body = ""

    return f"{edge}{body}{edge}"


def print_text(text: str, external_call: bool, fmt: TextFormat) -> None:
    """Print a box line holding text aligned by fmt."""
    print(format_text(text, external_call, fmt))


def clear_screen() -> None:
    """Clear the terminal and move the cursor to the top left corner."""
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def leave_blank_line() -> None:
    """Print an empty line."""
    print()