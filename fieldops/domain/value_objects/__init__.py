"""
Domain value objects package.
"""

from .job_schedule import JobSchedule, Recurrence
from .job_status import JobStatus
from .location import Location
from .workflow_type import WorkflowType

__all__ = [
    "JobSchedule",
    "JobStatus",
    "Location",
    "Recurrence",
    "WorkflowType",
]
