"""Delete job use case."""

from uuid import UUID

from fieldops.application.services.authorization_gate import AuthorizationGate, Operation
from fieldops.application.services.job_lifecycle_engine import JobLifecycleEngine
from fieldops.domain.entities.job import Job
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from fieldops.infrastructure.monitoring.metrics import record_job_deletion


class DeleteJobUseCase:
    """Use case for deleting a job with its assignments and workflow."""

    def __init__(
        self,
        lifecycle_engine: JobLifecycleEngine,
        authorization_gate: AuthorizationGate,
        transaction_service: TransactionService,
    ):
        self.lifecycle_engine = lifecycle_engine
        self.authorization_gate = authorization_gate
        self.transaction_service = transaction_service

    async def execute(self, job_id: UUID, requested_by: UUID) -> Job:
        await self.authorization_gate.require(requested_by, Operation.DELETE_JOB)

        job = await self.transaction_service.execute_in_transaction(
            lambda: self.lifecycle_engine.delete(job_id), name="delete_job"
        )

        record_job_deletion()
        return job
