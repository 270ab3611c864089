"""
Workflow and step domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.workflow_type import WorkflowType


@dataclass(frozen=True)
class Step:
    """One recorded status within a workflow. Never edited once written."""

    workflow_id: UUID
    status: JobStatus
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Workflow:
    """Audit envelope holding the ordered status history of one job."""

    job_id: UUID
    id: UUID = field(default_factory=uuid4)
    type: WorkflowType = WorkflowType.JOB
    steps: List[Step] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)

    def has_step(self, status: JobStatus) -> bool:
        """Check whether the given status has already been recorded."""
        return any(step.status == status for step in self.steps)

    def new_step(self, status: JobStatus) -> Step:
        """Build the step recording ``status`` for this workflow."""
        return Step(workflow_id=self.id, status=JobStatus.parse(status))

    @property
    def statuses(self) -> List[JobStatus]:
        return [step.status for step in self.steps]
