"""
Domain events package.
"""

from .job_status_changed import JobStatusChanged

__all__ = [
    "JobStatusChanged",
]
