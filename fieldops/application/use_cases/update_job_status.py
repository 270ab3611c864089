"""Update job status use case."""

from dataclasses import dataclass
from typing import Union
from uuid import UUID

from fieldops.application.services.authorization_gate import AuthorizationGate, Operation
from fieldops.application.services.job_lifecycle_engine import (
    JobLifecycleEngine,
    TransitionResult,
)
from fieldops.config.logging import get_logger
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from fieldops.infrastructure.monitoring.metrics import record_status_transition

logger = get_logger(__name__)


@dataclass
class UpdateJobStatusRequest:
    """Request for changing a job's status."""

    job_id: UUID
    status: Union[JobStatus, str]
    requested_by: UUID


class UpdateJobStatusUseCase:
    """Use case for the generic status transition."""

    def __init__(
        self,
        lifecycle_engine: JobLifecycleEngine,
        authorization_gate: AuthorizationGate,
        transaction_service: TransactionService,
    ):
        self.lifecycle_engine = lifecycle_engine
        self.authorization_gate = authorization_gate
        self.transaction_service = transaction_service

    async def execute(self, request: UpdateJobStatusRequest) -> TransitionResult:
        """Move a job to the requested status and record the workflow step."""
        status = JobStatus.parse(request.status)

        await self.authorization_gate.require(
            request.requested_by, Operation.UPDATE_JOB_STATUS
        )

        result = await self.transaction_service.execute_in_transaction(
            lambda: self.lifecycle_engine.transition_status(request.job_id, status),
            name="update_job_status",
        )

        record_status_transition(result.to_event())

        return result
