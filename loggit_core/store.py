"""
Log Store

Persists log records to a JSON file in the user's home directory.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from loggit_core.exceptions import CorruptStoreError, RecordNotFoundError
from loggit_core.models import LogRecord

logger = logging.getLogger(__name__)

DEFAULT_STORE_DIR = ".loggit"
DEFAULT_STORE_FILE = "db.json"


def default_store_path() -> Path:
    """Return the default store location (~/.loggit/db.json)."""
    return Path.home() / DEFAULT_STORE_DIR / DEFAULT_STORE_FILE


class LogStore:
    """
    Manages log records persisted to a single JSON file.

    The file holds ``{"Logs": [...]}``. An empty file or ``"Logs": null``
    both mean the store is empty. Every mutation rewrites the whole file.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Initialize LogStore.

        Args:
            path: Store file location (default: ~/.loggit/db.json)
        """
        self.path = Path(path).expanduser() if path else default_store_path()
        self.records: list[LogRecord] = []
        self.ensure()
        self.load()

    def ensure(self) -> None:
        """Create the store directory and an empty store file if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            logger.info(f"Creating log store at {self.path}")
            self.path.touch()

    def load(self) -> None:
        """
        Reload records from disk.

        Raises:
            CorruptStoreError: If the file is not a valid store document
        """
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            self.records = []
            return

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"Corrupted log file {self.path}: {e}", str(self.path))

        if not isinstance(document, dict):
            raise CorruptStoreError(f"Invalid log file format in {self.path}", str(self.path))

        entries = document.get("Logs") or []
        try:
            self.records = [LogRecord.from_dict(entry) for entry in entries]
        except (AttributeError, TypeError, ValueError) as e:
            raise CorruptStoreError(f"Invalid log entry in {self.path}: {e}", str(self.path))

    def save(self) -> None:
        """Write all records to disk."""
        document = {"Logs": [record.to_dict() for record in self.records]}
        with open(self.path, 'w', encoding="utf-8") as f:
            json.dump(document, f, indent=2)
        logger.debug(f"Saved {len(self.records)} logs to {self.path}")

    def add_log(self, record: LogRecord) -> None:
        self.records.append(record)
        self.save()
        logger.info(f"Added log for {record.customer!r} ({record.hours}h)")

    def get_logs(self) -> list[LogRecord]:
        """Return a fresh copy of all records, re-read from disk."""
        self.load()
        return list(self.records)

    def get_log(self, index: int) -> LogRecord:
        self.load()
        self._check_index(index)
        return self.records[index]

    def update_log(self, index: int, record: LogRecord) -> None:
        """
        Overwrite the record at index.

        Raises:
            RecordNotFoundError: If index is out of range
        """
        self.load()
        self._check_index(index)
        self.records[index] = record
        self.save()
        logger.info(f"Updated log {index}")

    def remove_log(self, index: int) -> LogRecord:
        """
        Remove and return the record at index.

        Raises:
            RecordNotFoundError: If index is out of range
        """
        self.load()
        self._check_index(index)
        removed = self.records.pop(index)
        self.save()
        logger.info(f"Removed log {index}")
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.records):
            raise RecordNotFoundError(index, len(self.records))
