"""
Prometheus metrics for the job service.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

from fieldops.config.settings import settings
from fieldops.domain.events.job_status_changed import JobStatusChanged

registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the registry all job service metrics are registered on."""
    return registry


JOBS_CREATED = Counter(
    "jobs_created_total",
    "Total number of jobs created",
    ["company_id"],
    registry=registry,
)

JOB_STATUS_TRANSITIONS = Counter(
    "job_status_transitions_total",
    "Total number of job status transitions",
    ["from_status", "to_status"],
    registry=registry,
)

WORKFLOW_STEPS_RECORDED = Counter(
    "workflow_steps_recorded_total",
    "Total number of workflow steps appended",
    ["status"],
    registry=registry,
)

TECHNICIANS_ASSIGNED = Counter(
    "technicians_assigned_total",
    "Total number of technician assignments made",
    ["operation"],
    registry=registry,
)

JOBS_DELETED = Counter(
    "jobs_deleted_total",
    "Total number of jobs deleted",
    registry=registry,
)

ERRORS = Counter(
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
    registry=registry,
)


def record_job_creation(company_id: str) -> None:
    if settings.ENABLE_METRICS:
        JOBS_CREATED.labels(company_id=company_id).inc()


def record_status_transition(event: JobStatusChanged) -> None:
    if not settings.ENABLE_METRICS:
        return
    from_status = event.previous_status.value if event.previous_status else "NONE"
    JOB_STATUS_TRANSITIONS.labels(
        from_status=from_status, to_status=event.new_status.value
    ).inc()
    if event.step_recorded:
        WORKFLOW_STEPS_RECORDED.labels(status=event.new_status.value).inc()


def record_technician_assignment(operation: str, count: int) -> None:
    if settings.ENABLE_METRICS and count > 0:
        TECHNICIANS_ASSIGNED.labels(operation=operation).inc(count)


def record_job_deletion() -> None:
    if settings.ENABLE_METRICS:
        JOBS_DELETED.inc()


def record_error(error_type: str, component: str) -> None:
    if settings.ENABLE_METRICS:
        ERRORS.labels(error_type=error_type, component=component).inc()


def get_metrics() -> bytes:
    """Render all metrics in the Prometheus text format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
