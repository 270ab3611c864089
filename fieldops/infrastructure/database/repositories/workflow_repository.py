"""Workflow repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fieldops.application.interfaces.repositories import WorkflowRepositoryInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.workflow import Step, Workflow
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.workflow_type import WorkflowType
from fieldops.infrastructure.database.models.job import JobModel
from fieldops.infrastructure.database.models.workflow import StepModel, WorkflowModel
from fieldops.infrastructure.database.repositories.upsert import (
    insert_ignoring_conflicts,
)

logger = get_logger(__name__)


class WorkflowRepository(WorkflowRepositoryInterface):
    """Workflow and step repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self):
        return (
            select(WorkflowModel)
            .options(selectinload(WorkflowModel.steps))
            .execution_options(populate_existing=True)
        )

    async def create(self, workflow: Workflow) -> Workflow:
        """Create a workflow together with its initial steps."""
        workflow_model = WorkflowModel(
            id=workflow.id,
            job_id=workflow.job_id,
            type=workflow.type.value,
            created_at=workflow.created_at,
        )
        workflow_model.steps = [
            StepModel(
                id=step.id,
                status=step.status.value,
                created_at=step.created_at,
            )
            for step in workflow.steps
        ]

        self.db.add(workflow_model)
        await self.db.flush()

        return await self.get_by_job_id(workflow.job_id)

    async def get_by_job_id(self, job_id: UUID) -> Optional[Workflow]:
        """Get the workflow of a job, steps ordered by creation."""
        stmt = self._select().where(WorkflowModel.job_id == job_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def append_step_if_absent(
        self, workflow_id: UUID, status: JobStatus
    ) -> Optional[Step]:
        """Append a step unless one with the same status exists.

        The unique (workflow_id, status) index settles concurrent appends: the
        losing insert is skipped instead of failing the transaction.
        """
        status = JobStatus.parse(status)

        existing = await self._get_step(workflow_id, status)
        if existing is not None:
            return None

        inserted = await insert_ignoring_conflicts(
            self.db,
            StepModel,
            [{"workflow_id": workflow_id, "status": status.value}],
            index_elements=["workflow_id", "status"],
        )
        if not inserted:
            logger.info(
                "Step recorded concurrently, skipping",
                workflow_id=str(workflow_id),
                status=status.value,
            )
            return None

        model = await self._get_step(workflow_id, status)
        return self._step_to_entity(model)

    async def list_by_company(self, company_id: UUID) -> List[Workflow]:
        """List the workflows of all jobs of a company."""
        stmt = (
            self._select()
            .join(JobModel, JobModel.id == WorkflowModel.job_id)
            .where(JobModel.company_id == company_id)
            .order_by(WorkflowModel.created_at)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def delete_by_job_id(self, job_id: UUID) -> int:
        """Delete a job's workflows and their steps."""
        workflow_ids = select(WorkflowModel.id).where(WorkflowModel.job_id == job_id)
        await self.db.execute(
            delete(StepModel)
            .where(StepModel.workflow_id.in_(workflow_ids))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(
            delete(WorkflowModel)
            .where(WorkflowModel.job_id == job_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.flush()
        return result.rowcount or 0

    async def _get_step(self, workflow_id: UUID, status: JobStatus) -> Optional[StepModel]:
        stmt = select(StepModel).where(
            StepModel.workflow_id == workflow_id,
            StepModel.status == status.value,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _step_to_entity(self, model: StepModel) -> Step:
        return Step(
            id=model.id,
            workflow_id=model.workflow_id,
            status=JobStatus.parse(model.status),
            created_at=model.created_at,
        )

    def _model_to_entity(self, model: WorkflowModel) -> Workflow:
        """Convert SQLAlchemy model to domain entity."""
        return Workflow(
            id=model.id,
            job_id=model.job_id,
            type=WorkflowType(model.type),
            steps=[self._step_to_entity(step) for step in model.steps],
            created_at=model.created_at,
        )
