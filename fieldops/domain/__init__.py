"""
Domain package.
"""

from .entities import *
from .events import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "ClientRef",
    "Job",
    "JobTechnician",
    "JobTypeRef",
    "Step",
    "TechnicianRef",
    "User",
    "Workflow",
    # Events
    "JobStatusChanged",
    # Exceptions
    "AuthenticationError",
    "ForbiddenError",
    "InvalidReferenceError",
    "InvalidStatusError",
    "InvalidTechnicianError",
    "JobNotFoundError",
    "JobServiceError",
    "NotFoundError",
    "ScheduleError",
    "TransitionNotAllowedError",
    "ValidationError",
    "WorkflowNotFoundError",
    # Value Objects
    "JobSchedule",
    "JobStatus",
    "Location",
    "Recurrence",
    "WorkflowType",
]
