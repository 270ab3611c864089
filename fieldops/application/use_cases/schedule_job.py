"""Schedule job use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from fieldops.application.services.authorization_gate import AuthorizationGate, Operation
from fieldops.application.services.job_lifecycle_engine import (
    JobLifecycleEngine,
    TransitionResult,
)
from fieldops.config.logging import get_logger
from fieldops.domain.value_objects.job_schedule import JobSchedule, Recurrence
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from fieldops.infrastructure.monitoring.metrics import record_status_transition

logger = get_logger(__name__)


@dataclass
class ScheduleJobRequest:
    """Request for scheduling a job."""

    job_id: UUID
    start_date: datetime
    requested_by: UUID
    end_date: Optional[datetime] = None
    recurrence: Optional[Recurrence] = None


class ScheduleJobUseCase:
    """Use case for setting a job's schedule and moving it to SCHEDULED."""

    def __init__(
        self,
        lifecycle_engine: JobLifecycleEngine,
        authorization_gate: AuthorizationGate,
        transaction_service: TransactionService,
    ):
        self.lifecycle_engine = lifecycle_engine
        self.authorization_gate = authorization_gate
        self.transaction_service = transaction_service

    async def execute(self, request: ScheduleJobRequest) -> TransitionResult:
        # Raises ScheduleError when end_date precedes start_date
        schedule = JobSchedule(
            start_date=request.start_date,
            end_date=request.end_date,
            recurrence=request.recurrence,
        )

        await self.authorization_gate.require(request.requested_by, Operation.SCHEDULE_JOB)

        async def schedule_job():
            job = await self.lifecycle_engine.load_for_update(request.job_id)
            job.set_schedule(schedule)
            return await self.lifecycle_engine.transition_status(
                job.id, JobStatus.SCHEDULED, job=job
            )

        result = await self.transaction_service.execute_in_transaction(
            schedule_job, name="schedule_job"
        )

        record_status_transition(result.to_event())

        logger.info(
            "Job scheduled",
            job_id=str(request.job_id),
            start_date=schedule.start_date.isoformat(),
            end_date=schedule.end_date.isoformat(),
            recurring=schedule.is_recurring,
        )

        return result
