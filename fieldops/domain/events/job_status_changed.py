"""
Job status changed domain event.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from fieldops.domain.value_objects.job_status import JobStatus


@dataclass
class JobStatusChanged:
    """Event raised when a job's status is set."""

    job_id: UUID
    workflow_id: UUID
    previous_status: Optional[JobStatus]
    new_status: JobStatus
    changed_at: datetime
    step_recorded: bool = True
