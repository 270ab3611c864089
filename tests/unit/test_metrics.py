"""
Unit tests for the job service metrics.
"""

from datetime import datetime, timezone
from uuid import uuid4

from fieldops.domain.events.job_status_changed import JobStatusChanged
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.infrastructure.monitoring.metrics import (
    get_registry,
    record_status_transition,
)


def _sample(name, **labels):
    return get_registry().get_sample_value(name, labels) or 0.0


def _event(previous, new, step_recorded=True):
    return JobStatusChanged(
        job_id=uuid4(),
        workflow_id=uuid4(),
        previous_status=previous,
        new_status=new,
        changed_at=datetime.now(timezone.utc),
        step_recorded=step_recorded,
    )


class TestStatusTransitionMetrics:
    def test_transition_and_step_counted(self):
        transitions = _sample(
            "job_status_transitions_total", from_status="ONGOING", to_status="COMPLETED"
        )
        steps = _sample("workflow_steps_recorded_total", status="COMPLETED")

        record_status_transition(_event(JobStatus.ONGOING, JobStatus.COMPLETED))

        assert (
            _sample(
                "job_status_transitions_total",
                from_status="ONGOING",
                to_status="COMPLETED",
            )
            == transitions + 1
        )
        assert _sample("workflow_steps_recorded_total", status="COMPLETED") == steps + 1

    def test_repeated_status_counts_no_step(self):
        steps = _sample("workflow_steps_recorded_total", status="ACCEPTED")

        record_status_transition(
            _event(JobStatus.ACCEPTED, JobStatus.ACCEPTED, step_recorded=False)
        )

        assert _sample("workflow_steps_recorded_total", status="ACCEPTED") == steps
