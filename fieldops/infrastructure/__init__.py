"""
Infrastructure package.
"""

from .database import *
from .monitoring import *

__all__ = [
    # Database
    "get_database_health",
    # Monitoring
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_error",
    "record_job_creation",
    "record_job_deletion",
    "record_status_transition",
    "record_technician_assignment",
]
