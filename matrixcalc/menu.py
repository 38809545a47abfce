"""Interactive drop-down menu driven by the arrow keys."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Callable, Sequence

from matrixcalc.boxes import box_line
from matrixcalc.console import DOWN_ARROW, ENTER_KEY, ESC_KEY, UP_ARROW, TextFormat
from matrixcalc.text import clear_screen, format_text

EXIT_LABEL = "Esci"
INSTRUCTIONS = "USA LE FRECCE PER MUOVERTI E INVIO PER SELEZIONARE"


class Key(enum.IntEnum):
    """Keys the menu reacts to."""

    OTHER = -1
    UP = UP_ARROW
    DOWN = DOWN_ARROW
    ENTER = ENTER_KEY
    ESC = ESC_KEY


def render_menu(question: str, options: Sequence[str], selection: int) -> str:
    """Return the menu screen with the entry at index selection highlighted.

    Entry 0 is the exit entry; entry i (i >= 1) is options[i - 1].
    """
    lines = [box_line(), format_text(question, False, TextFormat.CENTER), box_line()]

    marker = "*" if selection == 0 else "-"
    lines.append(format_text(f" {marker} {EXIT_LABEL}", False, TextFormat.LEFT))
    lines.append(format_text("", False, TextFormat.CENTER))

    for index, option in enumerate(options, start=1):
        marker = "*" if selection == index else "-"
        lines.append(format_text(f" {marker} {option}", False, TextFormat.LEFT))

    lines.append(box_line())
    lines.extend(["", ""])
    lines.append(format_text(INSTRUCTIONS, True, TextFormat.CENTER))
    return "\n".join(lines) + "\n"


def _read_windows_key() -> Key:
    import msvcrt

    first = msvcrt.getch()
    if first in (b"\xe0", b"\x00"):
        second = msvcrt.getch()
        if second == b"H":
            return Key.UP
        if second == b"P":
            return Key.DOWN
        return Key.OTHER
    if first == b"\r":
        return Key.ENTER
    if first == b"\x1b":
        return Key.ESC
    return Key.OTHER


def _read_posix_key() -> Key:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        first = os.read(fd, 1)
        if first in (b"\r", b"\n"):
            return Key.ENTER
        if first != b"\x1b":
            return Key.OTHER
        ready, _, _ = select.select([fd], [], [], 0.05)
        if not ready:
            return Key.ESC
        sequence = os.read(fd, 2)
        if sequence in (b"[A", b"OA"):
            return Key.UP
        if sequence in (b"[B", b"OB"):
            return Key.DOWN
        return Key.OTHER
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_terminal_key() -> Key:
    if sys.platform == "win32":
        return _read_windows_key()
    return _read_posix_key()


def read_key() -> Key:
    """Block until a key is pressed on the terminal and return it."""
    return _read_terminal_key()


def new_menu(
    question: str,
    options: Sequence[str],
    read_key: Callable[[], Key] | None = None,
) -> int:
    """Show the menu until a choice is made.

    Return the chosen option's 1-based position, or 0 for the exit entry or ESC.
    """
    next_key = read_key if read_key is not None else _read_terminal_key
    entries = len(options) + 1
    selection = 0

    while True:
        clear_screen()
        sys.stdout.write(render_menu(question, options, selection))
        sys.stdout.flush()

        key = next_key()
        if key == Key.UP:
            selection = (selection - 1) % entries
        elif key == Key.DOWN:
            selection = (selection + 1) % entries
        elif key == Key.ENTER:
            return selection
        elif key == Key.ESC:
            return 0