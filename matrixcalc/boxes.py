"""Boxes drawn from the box side and box line characters."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from matrixcalc.console import BOX_CHAR, BOX_SIDE, BOX_WIDTH, TextFormat
from matrixcalc.text import format_text


def box_side() -> str:
    """Return an empty box row: two sides with blank space between them."""
    return BOX_SIDE + " " * (BOX_WIDTH - 2) + BOX_SIDE


def box_line() -> str:
    """Return the top or bottom border of a box."""
    return BOX_SIDE + BOX_CHAR * (BOX_WIDTH - 2) + BOX_SIDE


def format_box(lines: Iterable[str]) -> str:
    """Return a box holding each of the lines centred, one per row."""
    rows = [box_line()]
    rows.extend(format_text(line, False, TextFormat.CENTER) for line in lines)
    rows.append(box_line())
    return "\n".join(rows)


def print_box_side() -> None:
    """Print an empty box row without a trailing newline."""
    sys.stdout.write(box_side())


def print_box_lines() -> None:
    """Print the border of a box."""
    print(box_line())


def print_box(lines: Iterable[str]) -> None:
    """Print a box holding each of the lines centred."""
    print(format_box(lines))