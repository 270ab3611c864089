"""Read-side job use cases."""

from dataclasses import dataclass
from typing import Dict, List
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    JobRepositoryInterface,
    WorkflowRepositoryInterface,
)
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.domain.entities.job import Job
from fieldops.domain.entities.workflow import Workflow
from fieldops.domain.exceptions.not_found_error import (
    JobNotFoundError,
    WorkflowNotFoundError,
)
from fieldops.domain.value_objects.job_status import JobStatus

logger = get_logger(__name__)


@dataclass
class JobStatusCounts:
    """Number of a company's jobs in each status."""

    company_id: UUID
    counts: Dict[JobStatus, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def active(self) -> int:
        return sum(count for status, count in self.counts.items() if status.is_active())


class JobQueryService:
    """Queries over jobs and their workflows. Never writes."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        workflow_repo: WorkflowRepositoryInterface,
        feed_size: int = None,
    ):
        self.job_repo = job_repo
        self.workflow_repo = workflow_repo
        self.feed_size = feed_size or settings.JOB_FEED_SIZE

    async def get_job(self, job_id: UUID) -> Job:
        """Get one job with its client, technicians and job type."""
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise JobNotFoundError(job_id)
        return job

    async def list_company_jobs(
        self, company_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[Job]:
        return await self.job_repo.list_by_company(company_id, skip=skip, limit=limit)

    async def job_feed(self, company_id: UUID) -> List[Job]:
        """The newest jobs of a company, newest first."""
        return await self.job_repo.list_recent_by_company(company_id, self.feed_size)

    async def company_workflows(self, company_id: UUID) -> List[Workflow]:
        workflows = await self.workflow_repo.list_by_company(company_id)
        if not workflows:
            raise WorkflowNotFoundError(company_id)
        return workflows

    async def job_workflow(self, job_id: UUID) -> Workflow:
        workflow = await self.workflow_repo.get_by_job_id(job_id)
        if not workflow:
            raise WorkflowNotFoundError(job_id)
        return workflow

    async def status_counts(self, company_id: UUID) -> JobStatusCounts:
        counts = await self.job_repo.count_by_status(company_id)
        logger.debug("Job status counts computed", company_id=str(company_id))
        return JobStatusCounts(company_id=company_id, counts=counts)
