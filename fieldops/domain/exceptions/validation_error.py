"""
Validation-related domain exceptions.
"""

from typing import List, Optional

from .base import JobServiceError


class ValidationError(JobServiceError):
    """Base exception for validation errors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class ScheduleError(ValidationError):
    """Raised when a job schedule is inconsistent."""

    pass
