"""
Workflow API schemas.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from fieldops.domain.entities.workflow import Workflow
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.workflow_type import WorkflowType

from .common import CamelModel


class StepResponse(CamelModel):
    id: UUID
    status: JobStatus
    created_at: datetime


class WorkflowResponse(CamelModel):
    """Workflow with its steps in the order they were recorded."""

    id: UUID
    job_id: UUID
    type: WorkflowType
    steps: List[StepResponse]
    created_at: datetime

    @classmethod
    def from_entity(cls, workflow: Workflow) -> "WorkflowResponse":
        return cls(
            id=workflow.id,
            job_id=workflow.job_id,
            type=workflow.type,
            steps=[
                StepResponse(id=step.id, status=step.status, created_at=step.created_at)
                for step in workflow.steps
            ],
            created_at=workflow.created_at,
        )
