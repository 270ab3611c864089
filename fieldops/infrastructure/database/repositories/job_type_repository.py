"""
Job type repository implementation.
"""

from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.interfaces.repositories import JobTypeRepositoryInterface
from fieldops.domain.entities.job import JobTypeRef
from fieldops.infrastructure.database.models.job_type import JobTypeModel
from fieldops.infrastructure.database.repositories.upsert import (
    insert_ignoring_conflicts,
)


class JobTypeRepository(JobTypeRepositoryInterface):
    """Job type repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[JobTypeRef]:
        """List every job type."""
        result = await self.session.execute(
            select(JobTypeModel).order_by(JobTypeModel.name)
        )
        return [
            JobTypeRef(id=model.id, name=model.name) for model in result.scalars().all()
        ]

    async def create_many(self, names: Sequence[str]) -> int:
        """Create job types by name, skipping names that already exist."""
        return await insert_ignoring_conflicts(
            self.session,
            JobTypeModel,
            [{"name": name} for name in dict.fromkeys(names)],
            index_elements=["name"],
        )
