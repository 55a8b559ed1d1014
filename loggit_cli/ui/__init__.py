"""
ui - Terminal UI core for loggit.

Submodules:
    style   - Markup to ANSI escape renderer.
    keys    - Raw-mode single key reader.
    prompts - Line-based prompts with defaults.
    menu    - Single- and multi-select menus.
    table   - Navigable table and the store-backed log viewer.
    screen  - Clear screen, cursor visibility, in-place repaint.
"""

from loggit_cli.ui.style import STYLES, parse, escape, print_markup, println
from loggit_cli.ui.keys import read_key, decode_key
from loggit_cli.ui.prompts import Prompt, FloatPrompt
from loggit_cli.ui.menu import Menu, MenuItem
from loggit_cli.ui.table import Table, LogTable
from loggit_cli.ui.screen import (
    RepaintRegion,
    clear_screen,
    hide_cursor,
    show_cursor,
    hidden_cursor,
)

__all__ = [
    # Style
    "STYLES",
    "parse",
    "escape",
    "print_markup",
    "println",
    # Keys
    "read_key",
    "decode_key",
    # Widgets
    "Prompt",
    "FloatPrompt",
    "Menu",
    "MenuItem",
    "Table",
    "LogTable",
    # Screen
    "RepaintRegion",
    "clear_screen",
    "hide_cursor",
    "show_cursor",
    "hidden_cursor",
]
