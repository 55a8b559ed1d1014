"""
Add command - record a new log entry
"""

import logging
from datetime import date

from rich.markup import escape

from loggit_core.models import LogRecord
from loggit_core.store import LogStore
from loggit_cli.ui.prompts import FloatPrompt, Prompt
from loggit_cli.ui.screen import clear_screen
from loggit_cli.utils.config import CLIConfig
from loggit_cli.utils.output import print_success

logger = logging.getLogger(__name__)


def today(date_format: str) -> str:
    return date.today().strftime(date_format)


def add_log(store: LogStore, config: CLIConfig) -> LogRecord:
    """
    Prompt for the four fields of a log and append it to the store.

    Raises:
        InputError: If hours is not a number
    """
    clear_screen()
    delay = config.get("ui", "input_delay")
    date_format = config.get("ui", "date_format", "%d-%m-%Y")

    record = LogRecord(
        customer=Prompt("Customer:", delay).get(),
        hours=FloatPrompt("Hours:", delay).get(),
        date=Prompt("Date:", delay).with_default(today(date_format)).get(),
        description=Prompt("Description:", delay).get(),
    )
    store.add_log(record)
    print_success(f"Logged {record.hours:g}h for {escape(record.customer)}")
    return record
