"""
Job-technician assignment entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class JobTechnician:
    """Link between a job and one assigned technician."""

    job_id: UUID
    technician_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
