"""
Log record model
"""

from dataclasses import dataclass
from typing import Any


HOURS_FORMAT = "{:.2f}"


@dataclass
class LogRecord:
    """
    One logged work entry.

    The date is free-form text and is never parsed as a calendar date.
    """
    customer: str
    hours: float
    date: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "customer": self.customer,
            "hours": self.hours,
            "date": self.date,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogRecord":
        """Build a record, treating missing fields as empty values."""
        return cls(
            customer=str(data.get("customer") or ""),
            hours=float(data.get("hours") or 0.0),
            date=str(data.get("date") or ""),
            description=str(data.get("description") or ""),
        )

    def to_row(self) -> list[str]:
        """Cells shown by the log viewer, hours rounded to two places."""
        return [
            self.customer,
            HOURS_FORMAT.format(self.hours),
            self.date,
            self.description,
        ]
