"""
Job status domain exceptions.
"""

from typing import List

from .base import JobServiceError


class InvalidStatusError(JobServiceError):
    """Raised when a value is not a member of the job status enum."""

    def __init__(self, value, allowed: List[str]):
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid job status '{value}', expected one of: {', '.join(allowed)}"
        )


class TransitionNotAllowedError(JobServiceError):
    """Raised when the transition policy rejects a status change."""

    def __init__(self, current_status: str, requested_status: str):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot move job from '{current_status}' to '{requested_status}'"
        )
