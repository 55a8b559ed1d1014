"""
Navigable table widget and the store-backed log viewer
"""

import logging
import time
from typing import Callable, Optional

from loggit_core.exceptions import StoreError
from loggit_core.models import LogRecord
from loggit_core.store import LogStore
from loggit_cli.ui import keys
from loggit_cli.ui.prompts import FloatPrompt, Prompt
from loggit_cli.ui.screen import RepaintRegion, clear_screen, hidden_cursor, hide_cursor, show_cursor
from loggit_cli.ui.style import escape, println

logger = logging.getLogger(__name__)

PADDING = 2
MESSAGE_DELAY = 1.0
FOOTER = "D to delete, E to edit, Enter to exit, B to go back"

HEADER_STYLE = "[bgBlack,bold,blue]"
ROW_STYLE = "[bgBlack,white]"
SELECTED_ROW_STYLE = "[bgWhite,black]"
FOOTER_STYLE = "[bgBlack,green]"


class Table:
    """
    Column/row viewer with a highlighted row.

    Subclasses implement delete_selected() and edit_selected() to act on
    the highlighted row; the base table only navigates.
    """

    def __init__(self, padding: int = PADDING, read_key: Optional[Callable[[], int]] = None):
        self.columns: list[str] = []
        self.rows: list[list[str]] = []
        self.selected_row = 0
        self.padding = padding
        self._read_key = read_key

    def add_column(self, column: str) -> "Table":
        self.columns.append(column)
        return self

    def add_row(self, row: list[str]) -> "Table":
        if len(row) != len(self.columns):
            raise ValueError(f"Row has {len(row)} cells, table has {len(self.columns)} columns")
        self.rows.append(list(row))
        return self

    def column_widths(self) -> list[int]:
        widths = []
        for i, column in enumerate(self.columns):
            longest = max((len(row[i]) for row in self.rows), default=0)
            widths.append(max(longest, len(column)) + self.padding)
        return widths

    def move_up(self) -> None:
        self._clamp(self.selected_row - 1)

    def move_down(self) -> None:
        self._clamp(self.selected_row + 1)

    def _clamp(self, index: int) -> None:
        self.selected_row = max(min(index, len(self.rows) - 1), 0)

    def _render_cells(self, style: str, cells: list[str], widths: list[int]) -> str:
        gap = " " * self.padding
        return "".join(
            f"{style}{' ' * (width - len(cell))}{escape(cell)}{gap}[reset]"
            for cell, width in zip(cells, widths)
        )

    def render(self) -> str:
        """Header, one line per row and the footer hint, as markup."""
        widths = self.column_widths()
        lines = [self._render_cells(HEADER_STYLE, self.columns, widths)]
        for i, row in enumerate(self.rows):
            style = SELECTED_ROW_STYLE if i == self.selected_row else ROW_STYLE
            lines.append(self._render_cells(style, row, widths))

        whitespace = " " * max(sum(widths) // 2 - len(FOOTER) // 2, 0)
        lines.append(f"{FOOTER_STYLE}{whitespace}{FOOTER}{whitespace}[reset]")
        return "\n".join(lines) + "\n"

    def browse(self) -> None:
        """Navigate until enter or b; d and e act on the highlighted row."""
        region = RepaintRegion()
        with hidden_cursor():
            region.paint(self.render())
            while True:
                key = self._next_key()
                if keys.is_enter(key) or keys.is_letter(key, "b"):
                    region.clear()
                    return
                if key == keys.KEY_UP:
                    self.move_up()
                elif key == keys.KEY_DOWN:
                    self.move_down()
                elif keys.is_letter(key, "d"):
                    self.delete_selected()
                    region.reset()
                elif keys.is_letter(key, "e"):
                    self.edit_selected()
                    region.reset()
                region.paint(self.render())

    def delete_selected(self) -> None:
        pass

    def edit_selected(self) -> None:
        pass

    def _next_key(self) -> int:
        if self._read_key is not None:
            return self._read_key()
        return keys.read_key()


class LogTable(Table):
    """Table of log records that deletes and edits through a LogStore."""

    COLUMNS = ("Customer", "Hours", "Date", "Description")

    def __init__(
        self,
        store: LogStore,
        padding: int = PADDING,
        message_delay: float = MESSAGE_DELAY,
        input_delay: Optional[float] = None,
        read_key: Optional[Callable[[], int]] = None,
    ):
        super().__init__(padding=padding, read_key=read_key)
        self.store = store
        self.message_delay = message_delay
        self.input_delay = input_delay
        for column in self.COLUMNS:
            self.add_column(column)

    @classmethod
    def from_store(cls, store: LogStore, **kwargs) -> "LogTable":
        table = cls(store, **kwargs)
        for record in store.get_logs():
            table.add_row(record.to_row())
        return table

    def delete_selected(self) -> None:
        clear_screen()
        if not self.rows:
            self._flash("[red,bold]No log selected[reset]")
            return

        println("[red,bold]Are you sure you want to delete this log? [blue]/[y/n/][reset]")
        while True:
            key = self._next_key()
            if keys.is_letter(key, "y") or keys.is_letter(key, "n"):
                break

        if not keys.is_letter(key, "y"):
            clear_screen()
            return

        try:
            self.store.remove_log(self.selected_row)
        except StoreError as e:
            logger.warning(f"Delete failed: {e}")
            self._flash(f"[red,bold]{escape(str(e))}[reset]")
            return

        del self.rows[self.selected_row]
        self._clamp(self.selected_row)
        clear_screen()
        self._flash("[green,bold]Log deleted![reset]")

    def edit_selected(self) -> None:
        clear_screen()
        if not self.rows:
            self._flash("[red,bold]No log selected[reset]")
            return

        try:
            current = self.store.get_log(self.selected_row)
        except StoreError as e:
            logger.warning(f"Edit failed: {e}")
            self._flash(f"[red,bold]{escape(str(e))}[reset]")
            return

        delay = self.input_delay
        show_cursor()
        try:
            updated = LogRecord(
                customer=Prompt("Customer:", delay).with_default(current.customer).get(),
                hours=FloatPrompt("Hours:", delay).with_default(str(current.hours)).get(),
                date=Prompt("Date:", delay).with_default(current.date).get(),
                description=Prompt("Description:", delay).with_default(current.description).get(),
            )
        finally:
            hide_cursor()

        try:
            self.store.update_log(self.selected_row, updated)
        except StoreError as e:
            logger.warning(f"Edit failed: {e}")
            self._flash(f"[red,bold]{escape(str(e))}[reset]")
            return

        self.rows[self.selected_row] = updated.to_row()
        clear_screen()

    def _flash(self, markup: str) -> None:
        """Show a message briefly, then clear the screen."""
        println(markup)
        time.sleep(self.message_delay)
        clear_screen()
