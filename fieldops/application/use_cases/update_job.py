"""Update job use case."""

from dataclasses import dataclass, fields
from typing import List, Optional, Union
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    JobRepositoryInterface,
    JobTechnicianRepositoryInterface,
    UserRepositoryInterface,
)
from fieldops.application.services.authorization_gate import AuthorizationGate, Operation
from fieldops.application.services.job_lifecycle_engine import (
    JobLifecycleEngine,
    TransitionResult,
)
from fieldops.application.use_cases.assign_technicians import resolve_technicians
from fieldops.config.logging import get_logger
from fieldops.domain.entities.job import Job
from fieldops.domain.exceptions.validation_error import RequiredFieldError
from fieldops.domain.value_objects.job_schedule import JobSchedule
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.location import Location
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from fieldops.infrastructure.monitoring.metrics import (
    record_status_transition,
    record_technician_assignment,
)

logger = get_logger(__name__)


@dataclass
class JobUpdate:
    """Fields to change on a job. ``None`` means leave the field as it is."""

    name: Optional[str] = None
    description: Optional[str] = None
    job_type_id: Optional[UUID] = None
    client_id: Optional[UUID] = None
    dispatcher_id: Optional[UUID] = None
    location: Optional[Location] = None
    schedule: Optional[JobSchedule] = None
    technician_ids: Optional[List[UUID]] = None
    status: Optional[Union[JobStatus, str]] = None

    def present_fields(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


# Plain attributes copied onto the job as given
_SIMPLE_FIELDS = ("name", "description", "job_type_id", "client_id", "dispatcher_id")


@dataclass
class UpdateJobRequest:
    """Request for updating a job."""

    job_id: UUID
    changes: JobUpdate
    requested_by: UUID


@dataclass
class UpdateJobResult:
    """Result of a job update."""

    job: Job
    updated_fields: List[str]
    transition: Optional[TransitionResult] = None


class UpdateJobUseCase:
    """Use case for replacing the editable fields of a job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        user_repo: UserRepositoryInterface,
        job_technician_repo: JobTechnicianRepositoryInterface,
        lifecycle_engine: JobLifecycleEngine,
        authorization_gate: AuthorizationGate,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.user_repo = user_repo
        self.job_technician_repo = job_technician_repo
        self.lifecycle_engine = lifecycle_engine
        self.authorization_gate = authorization_gate
        self.transaction_service = transaction_service

    async def execute(self, request: UpdateJobRequest) -> UpdateJobResult:
        """Apply the present fields of a JobUpdate in one transaction.

        A technician list replaces the current assignments. A status goes
        through the lifecycle engine so the workflow records it.
        """
        changes = request.changes

        # 1. Validate the changes
        if changes.name is not None and not changes.name.strip():
            raise RequiredFieldError("name")
        status = JobStatus.parse(changes.status) if changes.status is not None else None

        await self.authorization_gate.require(request.requested_by, Operation.UPDATE_JOB)

        technician_ids = None
        if changes.technician_ids is not None:
            technician_ids = await resolve_technicians(self.user_repo, changes.technician_ids)

        # 2. Apply everything in one unit of work
        async def update():
            job = await self.lifecycle_engine.load_for_update(request.job_id)

            for name in _SIMPLE_FIELDS:
                value = getattr(changes, name)
                if value is not None:
                    setattr(job, name, value)
            if changes.location is not None:
                job.assign_location(changes.location)
            if changes.schedule is not None:
                job.set_schedule(changes.schedule)
            job.touch()

            if technician_ids is not None:
                await self.job_technician_repo.delete_by_job_id(job.id)
                await self.job_technician_repo.add_many(job.id, technician_ids)

            if status is not None:
                transition = await self.lifecycle_engine.transition_status(
                    job.id, status, job=job
                )
                return transition.job, transition

            return await self.job_repo.update(job), None

        job, transition = await self.transaction_service.execute_in_transaction(
            update, name="update_job"
        )

        if technician_ids is not None:
            record_technician_assignment("replace", len(technician_ids))
        if transition is not None:
            record_status_transition(transition.to_event())

        updated_fields = changes.present_fields()
        logger.info("Job updated", job_id=str(job.id), updated_fields=updated_fields)

        return UpdateJobResult(job=job, updated_fields=updated_fields, transition=transition)
