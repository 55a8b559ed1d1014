"""
Screen control - clearing, cursor visibility and in-place repaint
"""

import subprocess
import sys
from contextlib import contextmanager

from loggit_cli.ui.style import parse

CLEAR_AND_HOME = "\033[H\033[2J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CURSOR_UP = "\033[1A"
CLEAR_LINE = "\033[K"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def clear_screen() -> None:
    """Clear the terminal and move the cursor home."""
    if sys.platform.startswith(("linux", "darwin")):
        _write(CLEAR_AND_HOME + "\n")
    elif sys.platform.startswith("win"):
        subprocess.run(["cmd", "/c", "cls"], check=False)
    else:
        _write(f"Operating system {sys.platform} not supported, the screen cannot be cleared automatically")


def hide_cursor() -> None:
    _write(HIDE_CURSOR)


def show_cursor() -> None:
    _write(SHOW_CURSOR)


@contextmanager
def hidden_cursor():
    """Hide the terminal cursor for the duration of the block."""
    hide_cursor()
    try:
        yield
    finally:
        show_cursor()


class RepaintRegion:
    """
    A block of lines at the bottom of the terminal that is redrawn in place.

    The region remembers how many lines it last painted. Painting again moves
    the cursor up over those lines, clearing each one, before writing.
    """

    def __init__(self):
        self.height = 0

    def paint(self, markup: str) -> None:
        text = parse(markup)
        self._erase()
        _write(text)
        self.height = text.count("\n")

    def clear(self) -> None:
        """Erase the painted lines without drawing anything."""
        self._erase()
        self.height = 0

    def reset(self) -> None:
        """Forget the painted lines, e.g. after the whole screen was cleared."""
        self.height = 0

    def _erase(self) -> None:
        if self.height:
            _write((CURSOR_UP + CLEAR_LINE) * self.height)
