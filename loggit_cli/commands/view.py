"""
View command - browse, edit and delete logged entries
"""

from loggit_core.store import LogStore
from loggit_cli.ui.screen import clear_screen
from loggit_cli.ui.table import LogTable
from loggit_cli.utils.config import CLIConfig


def view_logs(store: LogStore, config: CLIConfig) -> LogTable:
    """Show every log in a navigable table until the user leaves it."""
    clear_screen()
    table = LogTable.from_store(
        store,
        padding=config.get("ui", "padding", 2),
        message_delay=config.get("ui", "message_delay", 1.0),
        input_delay=config.get("ui", "input_delay"),
    )
    table.browse()
    return table
