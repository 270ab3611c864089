"""
Job technician repository implementation.
"""

from typing import List, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.interfaces.repositories import JobTechnicianRepositoryInterface
from fieldops.domain.entities.job_technician import JobTechnician
from fieldops.infrastructure.database.models.job_technician import JobTechnicianModel
from fieldops.infrastructure.database.repositories.upsert import (
    insert_ignoring_conflicts,
)


class JobTechnicianRepository(JobTechnicianRepositoryInterface):
    """Job technician repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_many(
        self, job_id: UUID, technician_ids: Sequence[UUID]
    ) -> List[JobTechnician]:
        """Link technicians to a job, skipping links that already exist."""
        await insert_ignoring_conflicts(
            self.session,
            JobTechnicianModel,
            [
                {"job_id": job_id, "technician_id": technician_id}
                for technician_id in dict.fromkeys(technician_ids)
            ],
            index_elements=["job_id", "technician_id"],
        )
        return await self.get_by_job_id(job_id)

    async def get_by_job_id(self, job_id: UUID) -> List[JobTechnician]:
        """Get every assignment of a job."""
        result = await self.session.execute(
            select(JobTechnicianModel)
            .where(JobTechnicianModel.job_id == job_id)
            .order_by(JobTechnicianModel.created_at)
        )
        return [
            JobTechnician(
                id=model.id,
                job_id=model.job_id,
                technician_id=model.technician_id,
                created_at=model.created_at,
            )
            for model in result.scalars().all()
        ]

    async def delete_by_job_id(self, job_id: UUID) -> int:
        """Remove every assignment of a job."""
        result = await self.session.execute(
            delete(JobTechnicianModel)
            .where(JobTechnicianModel.job_id == job_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount or 0
