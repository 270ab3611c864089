"""
Job lifecycle engine.

Owns the status of a job and keeps its workflow in step with it: every status
a job passes through is recorded exactly once as a workflow step. The engine
never commits; callers run it inside a TransactionService unit of work so the
job mutation and the step append land together or not at all.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple, Union
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    JobRepositoryInterface,
    JobTechnicianRepositoryInterface,
    WorkflowRepositoryInterface,
)
from fieldops.application.services.transition_policy import (
    PermissiveTransitionPolicy,
    TransitionPolicy,
)
from fieldops.config.logging import get_logger
from fieldops.domain.entities.job import Job
from fieldops.domain.entities.workflow import Step, Workflow
from fieldops.domain.events.job_status_changed import JobStatusChanged
from fieldops.domain.exceptions.not_found_error import JobNotFoundError
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.workflow_type import WorkflowType

logger = get_logger(__name__)


@dataclass
class TransitionResult:
    """Outcome of a status transition."""

    job: Job
    workflow: Workflow
    previous_status: JobStatus
    step: Optional[Step] = None

    @property
    def step_recorded(self) -> bool:
        return self.step is not None

    def to_event(self) -> JobStatusChanged:
        return JobStatusChanged(
            job_id=self.job.id,
            workflow_id=self.workflow.id,
            previous_status=self.previous_status,
            new_status=self.job.status,
            changed_at=self.job.updated_at or datetime.now(timezone.utc),
            step_recorded=self.step_recorded,
        )


class JobLifecycleEngine:
    """Applies job status transitions and maintains the workflow audit trail."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        workflow_repo: WorkflowRepositoryInterface,
        job_technician_repo: JobTechnicianRepositoryInterface,
        policy: Optional[TransitionPolicy] = None,
    ):
        self.job_repo = job_repo
        self.workflow_repo = workflow_repo
        self.job_technician_repo = job_technician_repo
        self.policy = policy or PermissiveTransitionPolicy()

    async def create(self, job: Job) -> Tuple[Job, Workflow]:
        """Persist a new job in CREATED state with its workflow and first step."""
        job.status = JobStatus.CREATED
        created_job = await self.job_repo.create(job)

        workflow = Workflow(job_id=created_job.id, type=WorkflowType.JOB)
        workflow.steps.append(workflow.new_step(JobStatus.CREATED))
        created_workflow = await self.workflow_repo.create(workflow)

        logger.info(
            "Job created with workflow",
            job_id=str(created_job.id),
            workflow_id=str(created_workflow.id),
            company_id=str(created_job.company_id),
        )

        return created_job, created_workflow

    async def load_for_update(self, job_id: UUID) -> Job:
        """Load a job and lock its row for the rest of the transaction."""
        job = await self.job_repo.get_by_id(job_id, for_update=True)
        if not job:
            raise JobNotFoundError(job_id)
        return job

    async def transition_status(
        self,
        job_id: UUID,
        new_status: Union[JobStatus, str],
        job: Optional[Job] = None,
    ) -> TransitionResult:
        """Set a job's status and record the step if not already recorded.

        ``job`` may be passed when the caller has already loaded (and locked)
        the job and mutated other fields on it; those changes are persisted
        together with the new status.
        """
        target = JobStatus.parse(new_status)

        if job is None:
            job = await self.load_for_update(job_id)

        self.policy.check(job.status, target)

        previous_status = job.change_status(target)
        updated_job = await self.job_repo.update(job)

        workflow = await self.workflow_repo.get_by_job_id(updated_job.id)
        if workflow is None:
            logger.warning(
                "Job has no workflow, creating one",
                job_id=str(updated_job.id),
            )
            workflow = await self.workflow_repo.create(
                Workflow(job_id=updated_job.id, type=WorkflowType.JOB)
            )

        step = None
        if not workflow.has_step(target):
            step = await self.workflow_repo.append_step_if_absent(workflow.id, target)
            if step is not None:
                workflow.steps.append(step)

        logger.info(
            "Job status changed",
            job_id=str(updated_job.id),
            previous_status=previous_status.value,
            new_status=target.value,
            step_recorded=step is not None,
            policy=self.policy.name,
        )

        return TransitionResult(
            job=updated_job,
            workflow=workflow,
            previous_status=previous_status,
            step=step,
        )

    async def delete(self, job_id: UUID) -> Job:
        """Delete a job with its assignments, workflow and steps."""
        job = await self.load_for_update(job_id)

        removed_assignments = await self.job_technician_repo.delete_by_job_id(job_id)
        removed_workflows = await self.workflow_repo.delete_by_job_id(job_id)
        await self.job_repo.delete(job_id)

        logger.info(
            "Job deleted",
            job_id=str(job_id),
            removed_assignments=removed_assignments,
            removed_workflows=removed_workflows,
        )

        return job
