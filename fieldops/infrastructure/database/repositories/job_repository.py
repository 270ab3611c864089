"""Job repository implementation."""

from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fieldops.application.interfaces.repositories import JobRepositoryInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.job import ClientRef, Job, JobTypeRef, TechnicianRef
from fieldops.domain.value_objects.job_schedule import JobSchedule
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.location import Location
from fieldops.infrastructure.database.models.job import JobModel
from fieldops.infrastructure.database.models.job_technician import JobTechnicianModel

logger = get_logger(__name__)


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self):
        return (
            select(JobModel)
            .options(
                selectinload(JobModel.technician_links).selectinload(
                    JobTechnicianModel.technician
                ),
                selectinload(JobModel.client),
                selectinload(JobModel.job_type),
            )
            .execution_options(populate_existing=True)
        )

    async def _get_model(self, job_id: UUID, for_update: bool = False) -> Optional[JobModel]:
        stmt = self._select().where(JobModel.id == job_id)
        if for_update:
            stmt = stmt.with_for_update(of=JobModel)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID."""
        model = await self._get_model(job_id, for_update=for_update)
        return self._model_to_entity(model) if model else None

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        job_model = JobModel(
            id=job.id,
            name=job.name,
            description=job.description,
            status=job.status.value,
            job_type_id=job.job_type_id,
            company_id=job.company_id,
            client_id=job.client_id,
            dispatcher_id=job.dispatcher_id,
            location=job.location.to_dict() if job.location else None,
            schedule=job.schedule.to_dict() if job.schedule else None,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )

        self.db.add(job_model)
        # Use flush instead of commit to maintain transaction atomicity
        await self.db.flush()

        return await self.get_by_id(job_model.id)

    async def update(self, job: Job) -> Job:
        """Update an existing job."""
        job_model = await self._get_model(job.id)

        if not job_model:
            raise ValueError(f"Job {job.id} not found")

        job_model.name = job.name
        job_model.description = job.description
        job_model.status = job.status.value
        job_model.job_type_id = job.job_type_id
        job_model.client_id = job.client_id
        job_model.dispatcher_id = job.dispatcher_id
        job_model.location = job.location.to_dict() if job.location else None
        job_model.schedule = job.schedule.to_dict() if job.schedule else None
        job_model.updated_at = job.updated_at

        # Use flush instead of commit to maintain transaction atomicity
        await self.db.flush()

        return await self.get_by_id(job.id)

    async def delete(self, job_id: UUID) -> bool:
        """Delete a job row. Dependent rows must already be gone."""
        result = await self.db.execute(delete(JobModel).where(JobModel.id == job_id))
        await self.db.flush()
        return (result.rowcount or 0) > 0

    async def list_by_company(
        self, company_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[Job]:
        """List jobs belonging to a company."""
        stmt = (
            self._select()
            .where(JobModel.company_id == company_id)
            .order_by(JobModel.created_at)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def list_recent_by_company(self, company_id: UUID, limit: int) -> List[Job]:
        """List the newest jobs of a company, newest first."""
        stmt = (
            self._select()
            .where(JobModel.company_id == company_id)
            .order_by(JobModel.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def count_by_status(self, company_id: UUID) -> Dict[JobStatus, int]:
        """Count a company's jobs per status."""
        stmt = (
            select(JobModel.status, func.count(JobModel.id))
            .where(JobModel.company_id == company_id)
            .group_by(JobModel.status)
        )
        result = await self.db.execute(stmt)
        counts = {status: 0 for status in JobStatus}
        for status, count in result.all():
            counts[JobStatus.parse(status)] = count
        return counts

    def _model_to_entity(self, model: JobModel) -> Job:
        """Convert SQLAlchemy model to domain entity."""
        technicians = [
            TechnicianRef(
                id=link.technician.id,
                first_name=link.technician.first_name,
                last_name=link.technician.last_name,
            )
            for link in model.technician_links
            if link.technician is not None
        ]

        client = None
        if model.client is not None:
            client = ClientRef(
                id=model.client.id,
                first_name=model.client.first_name,
                last_name=model.client.last_name,
                email=model.client.email,
            )

        job_type = None
        if model.job_type is not None:
            job_type = JobTypeRef(id=model.job_type.id, name=model.job_type.name)

        return Job(
            id=model.id,
            name=model.name,
            description=model.description,
            job_type_id=model.job_type_id,
            company_id=model.company_id,
            client_id=model.client_id,
            dispatcher_id=model.dispatcher_id,
            status=JobStatus.parse(model.status),
            location=Location.from_dict(model.location),
            schedule=JobSchedule.from_dict(model.schedule),
            created_at=model.created_at,
            updated_at=model.updated_at,
            technicians=technicians,
            client=client,
            job_type=job_type,
        )
