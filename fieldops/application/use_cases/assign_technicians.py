"""Assign technicians use case."""

from dataclasses import dataclass
from typing import List, Optional, Sequence
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
from fieldops.config.logging import get_logger
from fieldops.domain.entities.job import Job
from fieldops.domain.entities.job_technician import JobTechnician
from fieldops.domain.exceptions.not_found_error import JobNotFoundError
from fieldops.domain.exceptions.reference_error import InvalidTechnicianError
from fieldops.domain.exceptions.validation_error import RequiredFieldError
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


async def resolve_technicians(
    user_repo: UserRepositoryInterface, technician_ids: Sequence[UUID]
) -> List[UUID]:
    """Collapse duplicates and make sure every ID is a known user.

    Raises InvalidTechnicianError naming the IDs that did not resolve.
    """
    unique_ids = list(dict.fromkeys(technician_ids))
    users = await user_repo.get_many(unique_ids)
    found = {user.id for user in users}

    if len(found) < len(unique_ids):
        missing = [technician_id for technician_id in unique_ids if technician_id not in found]
        logger.warning("Unknown technician IDs", missing_ids=[str(i) for i in missing])
        raise InvalidTechnicianError(missing)

    return unique_ids


@dataclass
class AssignTechniciansRequest:
    """Request for assigning technicians to a job."""

    job_id: UUID
    technician_ids: List[UUID]
    requested_by: UUID
    location: Optional[Location] = None


@dataclass
class AssignTechniciansResult:
    """Result of a technician assignment."""

    job: Job
    assignments: List[JobTechnician]
    transition: TransitionResult


class AssignTechniciansUseCase:
    """Use case for linking technicians to a job and moving it to ASSIGNED."""

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

    async def execute(self, request: AssignTechniciansRequest) -> AssignTechniciansResult:
        """Assign technicians, set the job location and record ASSIGNED."""
        if not request.technician_ids:
            raise RequiredFieldError("technician_ids")

        await self.authorization_gate.require(
            request.requested_by, Operation.ASSIGN_TECHNICIANS
        )

        # 1. Job must exist
        if not await self.job_repo.get_by_id(request.job_id):
            raise JobNotFoundError(request.job_id)

        # 2. Every technician must exist
        technician_ids = await resolve_technicians(self.user_repo, request.technician_ids)

        # 3. Links, location and status change commit together
        async def assign():
            job = await self.lifecycle_engine.load_for_update(request.job_id)
            assignments = await self.job_technician_repo.add_many(job.id, technician_ids)
            if request.location is not None:
                job.assign_location(request.location)
            transition = await self.lifecycle_engine.transition_status(
                job.id, JobStatus.ASSIGNED, job=job
            )
            return assignments, transition

        assignments, transition = await self.transaction_service.execute_in_transaction(
            assign, name="assign_technicians"
        )

        record_technician_assignment("assign", len(technician_ids))
        record_status_transition(transition.to_event())

        logger.info(
            "Technicians assigned",
            job_id=str(request.job_id),
            technician_count=len(assignments),
        )

        return AssignTechniciansResult(
            job=transition.job, assignments=assignments, transition=transition
        )
