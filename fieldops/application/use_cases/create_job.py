"""Create job use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fieldops.application.services.authorization_gate import AuthorizationGate, Operation
from fieldops.application.services.job_lifecycle_engine import JobLifecycleEngine
from fieldops.config.logging import get_logger
from fieldops.domain.entities.job import Job
from fieldops.domain.entities.workflow import Workflow
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.domain.value_objects.location import Location
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from fieldops.infrastructure.monitoring.metrics import record_job_creation

logger = get_logger(__name__)


@dataclass
class CreateJobRequest:
    """Request for creating a job."""

    name: str
    description: str
    job_type_id: UUID
    company_id: UUID
    client_id: UUID
    dispatcher_id: UUID
    requested_by: UUID
    location: Optional[Location] = None


@dataclass
class CreateJobResult:
    """Result of job creation."""

    job: Job
    workflow: Workflow


class CreateJobUseCase:
    """Use case for creating a job together with its workflow."""

    def __init__(
        self,
        lifecycle_engine: JobLifecycleEngine,
        authorization_gate: AuthorizationGate,
        transaction_service: TransactionService,
    ):
        self.lifecycle_engine = lifecycle_engine
        self.authorization_gate = authorization_gate
        self.transaction_service = transaction_service

    async def execute(self, request: CreateJobRequest) -> CreateJobResult:
        """Create a job in CREATED state with a workflow holding its first step."""

        logger.info(
            "Starting job creation",
            name=request.name,
            company_id=str(request.company_id),
            requested_by=str(request.requested_by),
        )

        # 1. Build and validate the job before touching the store
        try:
            job = Job(
                name=request.name,
                description=request.description,
                job_type_id=request.job_type_id,
                company_id=request.company_id,
                client_id=request.client_id,
                dispatcher_id=request.dispatcher_id,
                location=request.location,
            )
        except ValueError as e:
            raise ValidationError(str(e), errors=[str(e)])

        # 2. Only owners and dispatchers may create jobs
        await self.authorization_gate.require(request.requested_by, Operation.CREATE_JOB)

        # 3. Job, workflow and CREATED step land together
        created_job, workflow = await self.transaction_service.execute_in_transaction(
            lambda: self.lifecycle_engine.create(job), name="create_job"
        )

        record_job_creation(str(created_job.company_id))

        logger.info(
            "Job created successfully",
            job_id=str(created_job.id),
            workflow_id=str(workflow.id),
        )

        return CreateJobResult(job=created_job, workflow=workflow)
