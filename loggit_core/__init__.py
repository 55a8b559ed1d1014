"""
Loggit Core - log records and their JSON store
"""

from loggit_core.models import LogRecord
from loggit_core.store import LogStore, default_store_path
from loggit_core.exceptions import (
    LoggitError,
    StoreError,
    RecordNotFoundError,
    CorruptStoreError,
)

__version__ = "0.1.0"

__all__ = [
    "LogRecord",
    "LogStore",
    "default_store_path",
    "LoggitError",
    "StoreError",
    "RecordNotFoundError",
    "CorruptStoreError",
]
