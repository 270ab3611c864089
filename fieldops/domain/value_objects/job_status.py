"""
Job status value object.
"""

from enum import Enum

from fieldops.domain.exceptions.status_error import InvalidStatusError


class JobStatus(str, Enum):
    """Job lifecycle status enumeration."""

    CREATED = "CREATED"
    ACCEPTED = "ACCEPTED"
    ASSIGNED = "ASSIGNED"
    SCHEDULED = "SCHEDULED"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value) -> "JobStatus":
        """Coerce a raw value into a JobStatus, rejecting unknown values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidStatusError(value, [status.value for status in cls])

    def is_active(self) -> bool:
        """Check if the job is assigned or being worked on."""
        return self in [self.ASSIGNED, self.SCHEDULED, self.ONGOING]
