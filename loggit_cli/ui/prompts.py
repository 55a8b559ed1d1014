"""
Line-based prompts with optional defaults
"""

import sys
import time
from typing import Optional

from loggit_cli.ui.style import escape, print_markup
from loggit_cli.utils.errors import InputError

INPUT_DELAY = 0.1


class Prompt:
    """
    Ask for one line of text.

    Input is read line-buffered from stdin, not in raw mode. An empty line
    falls back to the default when one is set.
    """

    def __init__(self, label: str, delay: Optional[float] = None):
        self.label = label
        self.rendered = f"[green,bold]{escape(label)}[reset]"
        self.default: Optional[str] = None
        self.delay = INPUT_DELAY if delay is None else delay

    def with_default(self, value: str) -> "Prompt":
        self.rendered = f"[green][bold]{escape(self.label)}[reset] [lightGray]/[{escape(value)}/][reset]"
        self.default = value
        return self

    def read_line(self) -> str:
        """Show the label and read a line, without the line ending."""
        print_markup(self.rendered)
        # Let any preceding raw-mode switch settle before reading.
        time.sleep(self.delay)
        return sys.stdin.readline().rstrip("\r\n")

    def get(self) -> str:
        value = self.read_line()
        if value == "" and self.default:
            return self.default
        return value


class FloatPrompt(Prompt):
    """Ask for a number. Invalid input is fatal; there is no re-prompt."""

    def get(self) -> float:
        value = super().get()
        try:
            return float(value)
        except ValueError:
            raise InputError(f"Invalid number: {value!r}")
