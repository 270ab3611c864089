"""
Base domain exception.
"""


class JobServiceError(Exception):
    """Base exception for all job service errors."""

    pass
