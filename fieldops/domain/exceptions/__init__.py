"""
Domain exceptions package.
"""

from .authorization_error import AuthenticationError, ForbiddenError
from .base import JobServiceError
from .not_found_error import JobNotFoundError, NotFoundError, WorkflowNotFoundError
from .reference_error import InvalidReferenceError, InvalidTechnicianError
from .status_error import InvalidStatusError, TransitionNotAllowedError
from .validation_error import (
    RequiredFieldError,
    ScheduleError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "ForbiddenError",
    "InvalidReferenceError",
    "InvalidStatusError",
    "InvalidTechnicianError",
    "JobNotFoundError",
    "JobServiceError",
    "NotFoundError",
    "RequiredFieldError",
    "ScheduleError",
    "TransitionNotAllowedError",
    "ValidationError",
    "WorkflowNotFoundError",
]
