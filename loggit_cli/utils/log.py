"""
Logging setup for the loggit CLI

Log output goes to a file only. Anything written to the terminal would
break the in-place redraw of the menu and table widgets.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOGGERS = ("loggit_core", "loggit_cli")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[str, int] = "WARNING", log_file: Optional[str] = None) -> Optional[Path]:
    """
    Attach a file handler to the loggit loggers.

    Args:
        level: Level name or number
        log_file: Path of the log file; None disables logging output

    Returns:
        Resolved log file path, or None when logging is disabled
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    path = None
    handler: logging.Handler
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    for name in LOGGERS:
        named = logging.getLogger(name)
        for existing in list(named.handlers):
            named.removeHandler(existing)
            existing.close()
        named.addHandler(handler)
        named.setLevel(level)
        named.propagate = False

    return path
