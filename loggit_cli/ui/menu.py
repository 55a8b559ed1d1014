"""
Arrow-key driven single- and multi-select menus
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from loggit_cli.ui import keys
from loggit_cli.ui.screen import RepaintRegion, hidden_cursor
from loggit_cli.ui.style import escape

logger = logging.getLogger(__name__)


@dataclass
class MenuItem:
    text: str
    value: str


class Menu:
    """
    Vertical list of items navigated with the arrow keys.

    The menu is repainted in place after every key, so it never scrolls the
    terminal while the user moves the cursor.
    """

    def __init__(self, prompt: str, read_key: Optional[Callable[[], int]] = None):
        self.prompt = prompt
        self.items: list[MenuItem] = []
        self.cursor = 0
        self.selected: list[int] = []
        self._read_key = read_key

    def add_item(self, text: str, value: str) -> "Menu":
        self.items.append(MenuItem(text=text, value=value))
        return self

    def move_up(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def move_down(self) -> None:
        self.cursor = max(min(self.cursor + 1, len(self.items) - 1), 0)

    def toggle(self) -> None:
        """Add the cursor row to the selection, or remove it if present."""
        if self.cursor in self.selected:
            self.selected.remove(self.cursor)
        else:
            self.selected.append(self.cursor)

    def selected_values(self) -> list[str]:
        """Values of the selected items in display order."""
        return [self.items[i].value for i in sorted(self.selected)]

    def render(self, multi: bool = False) -> str:
        lines = [escape(self.prompt)]
        for i, item in enumerate(self.items):
            text = escape(item.text)
            marker = ">" if i == self.cursor else " "
            if multi:
                box = "/[x/]" if i in self.selected else "/[ /]"
                lines.append(f"{marker} {box} [reset][bold][cyan]{text}[reset]")
            elif i == self.cursor:
                lines.append(f"[blue]> [reset][bold][cyan]{text}[reset]")
            else:
                lines.append(f"  [reset][bold][cyan]{text}[reset]")
        return "\n".join(lines) + "\n"

    def select(self) -> str:
        """Return the value of the item confirmed with enter."""
        self._require_items()
        region = RepaintRegion()
        with hidden_cursor():
            region.paint(self.render())
            while True:
                key = self._next_key()
                if key == keys.KEY_UP:
                    self.move_up()
                elif key == keys.KEY_DOWN:
                    self.move_down()
                elif keys.is_enter(key):
                    value = self.items[self.cursor].value
                    logger.debug(f"Menu {self.prompt!r} selected {value!r}")
                    return value
                region.paint(self.render())

    def multi_select(self) -> list[str]:
        """Toggle items with space; return the selected values on enter."""
        self._require_items()
        self.selected = []
        region = RepaintRegion()
        with hidden_cursor():
            region.paint(self.render(multi=True))
            while True:
                key = self._next_key()
                if key == keys.KEY_UP:
                    self.move_up()
                elif key == keys.KEY_DOWN:
                    self.move_down()
                elif key == keys.KEY_SPACE:
                    self.toggle()
                elif keys.is_enter(key):
                    return self.selected_values()
                region.paint(self.render(multi=True))

    def _next_key(self) -> int:
        if self._read_key is not None:
            return self._read_key()
        return keys.read_key()

    def _require_items(self) -> None:
        if not self.items:
            raise ValueError(f"Menu {self.prompt!r} has no items")
