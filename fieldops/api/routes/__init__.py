"""
API routes package.
"""

from .health import router as health_router
from .job_types import router as job_types_router
from .jobs import router as jobs_router
from .workflows import router as workflows_router

__all__ = [
    "health_router",
    "job_types_router",
    "jobs_router",
    "workflows_router",
]
