"""
Foreign reference domain exceptions.
"""

from typing import Iterable

from .base import JobServiceError


class InvalidReferenceError(JobServiceError):
    """Raised when a provided foreign ID does not resolve."""

    def __init__(self, reference: str, missing_ids: Iterable = ()):
        self.reference = reference
        self.missing_ids = [str(missing_id) for missing_id in missing_ids]
        super().__init__(f"One or more {reference} IDs are invalid")


class InvalidTechnicianError(InvalidReferenceError):
    """Raised when technician IDs do not resolve to users."""

    def __init__(self, missing_ids: Iterable = ()):
        super().__init__("technician", missing_ids)
