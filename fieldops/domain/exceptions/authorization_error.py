"""
Authentication and authorization domain exceptions.
"""

from .base import JobServiceError


class AuthenticationError(JobServiceError):
    """Raised when the caller cannot be identified."""

    pass


class ForbiddenError(JobServiceError):
    """Raised when the caller's role is not allowed to perform an operation."""

    def __init__(self, operation: str, role_name: str = None):
        self.operation = operation
        self.role_name = role_name
        super().__init__(f"Role '{role_name or 'unknown'}' is not allowed to {operation}")
