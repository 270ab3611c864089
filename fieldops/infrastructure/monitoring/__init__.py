"""
Monitoring package.
"""

from .health_checks import HealthChecker
from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_error,
    record_job_creation,
    record_job_deletion,
    record_status_transition,
    record_technician_assignment,
)

__all__ = [
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_error",
    "record_job_creation",
    "record_job_deletion",
    "record_status_transition",
    "record_technician_assignment",
]
