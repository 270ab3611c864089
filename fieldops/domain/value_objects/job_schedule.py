"""
Job schedule value object.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from fieldops.domain.exceptions.validation_error import ScheduleError


class Recurrence(str, Enum):
    """How often a scheduled job repeats."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


@dataclass(frozen=True)
class JobSchedule:
    """Date range and optional recurrence for a job.

    ``end_date`` falls back to ``start_date`` when not given, and may never be
    earlier than it.
    """

    start_date: datetime
    end_date: Optional[datetime] = None
    recurrence: Optional[Recurrence] = None

    def __post_init__(self):
        if self.start_date is None:
            raise ScheduleError("Start date is required")
        if self.end_date is None:
            object.__setattr__(self, "end_date", self.start_date)
        elif self.end_date < self.start_date:
            raise ScheduleError("End date cannot be earlier than start date")
        if self.recurrence is not None and not isinstance(self.recurrence, Recurrence):
            object.__setattr__(self, "recurrence", Recurrence(self.recurrence))

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON form stored on the job row."""
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "recurrence": self.recurrence.value if self.recurrence else None,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["JobSchedule"]:
        """Build a schedule from its stored form."""
        if not data:
            return None
        end_date = data.get("end_date")
        recurrence = data.get("recurrence")
        return cls(
            start_date=datetime.fromisoformat(data["start_date"]),
            end_date=datetime.fromisoformat(end_date) if end_date else None,
            recurrence=Recurrence(recurrence) if recurrence else None,
        )
