"""
loggit CLI - Main entry point
"""

import logging
from typing import Optional

import click
from rich.markup import escape

from loggit_core.exceptions import StoreError
from loggit_core.store import LogStore
from loggit_cli import __version__
from loggit_cli.commands.add import add_log
from loggit_cli.commands.view import view_logs
from loggit_cli.ui.menu import Menu
from loggit_cli.ui.screen import show_cursor
from loggit_cli.utils.config import CLIConfig, load_cli_config
from loggit_cli.utils.errors import CLIError, StorageError, handle_cli_error
from loggit_cli.utils.log import configure_logging
from loggit_cli.utils.output import print_info, print_warning

logger = logging.getLogger(__name__)

ACTIONS = {
    "add": add_log,
    "view": view_logs,
}


def main_menu() -> Menu:
    return (
        Menu("Select an action:")
        .add_item("Add a new log", "add")
        .add_item("View logs", "view")
        .add_item("Exit", "exit")
    )


def run(action: Optional[str], store: LogStore, config: CLIConfig) -> None:
    """
    Run an action, then keep offering the menu until the user exits.

    Any action other than add or view ends the session.
    """
    while True:
        if action is None:
            action = main_menu().select()
        handler = ACTIONS.get(action)
        if handler is None:
            if action != "exit":
                print_warning(f"Unknown action {escape(repr(action))}, exiting")
            logger.info(f"Exiting on action {action!r}")
            return
        logger.debug(f"Running action {action!r}")
        try:
            handler(store, config)
        except StoreError as e:
            raise StorageError(str(e))
        action = None


@click.command()
@click.argument('action', required=False)
@click.option(
    '--config', 'config_file',
    type=click.Path(exists=True, dir_okay=False),
    help='Config file to use instead of ~/.loggit.yaml and ./.loggit.yaml'
)
@click.option(
    '--db', 'db_path',
    type=click.Path(dir_okay=False),
    help='Log store file (default: ~/.loggit/db.json)'
)
@click.option('--verbose', '-v', is_flag=True, help='Debug logging and full tracebacks')
@click.version_option(version=__version__, prog_name="loggit")
def cli(action, config_file, db_path, verbose):
    """
    loggit - log the hours you work for each customer

    \b
    Actions:
      add    - Record a new log
      view   - Browse, edit and delete logs
      exit   - Quit

    \b
    Examples:
      loggit             # Choose an action from the menu
      loggit add         # Jump straight to a new log
      loggit view        # Open the log viewer

    \b
    Viewer keys:
      Up/Down - Move the highlight
      d       - Delete the highlighted log
      e       - Edit the highlighted log
      Enter/b - Back to the menu
    """
    config = load_cli_config(config_file)
    configure_logging(
        "DEBUG" if verbose else config.get("logging", "level", "WARNING"),
        config.get("logging", "file"),
    )

    try:
        try:
            store = LogStore(db_path or config.get("storage", "path"))
        except (StoreError, OSError) as e:
            raise StorageError(f"Cannot open log store: {e}")
        run(action, store, config)
    except KeyboardInterrupt:
        show_cursor()
        click.echo()
        print_info("Goodbye!")
    except CLIError as e:
        show_cursor()
        handle_cli_error(e, verbose=verbose)


def main():
    """Main entry point with error handling"""
    try:
        cli()
    except Exception as exc:
        handle_cli_error(exc, verbose=False)


if __name__ == "__main__":
    main()
