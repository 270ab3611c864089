"""
Unit tests for ScheduleJobUseCase.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from fieldops.application.services.authorization_gate import AuthorizationGate
from fieldops.application.services.job_lifecycle_engine import JobLifecycleEngine
from fieldops.application.use_cases.schedule_job import (
    ScheduleJobRequest,
    ScheduleJobUseCase,
)
from fieldops.domain.entities.workflow import Workflow
from fieldops.domain.exceptions.not_found_error import JobNotFoundError
from fieldops.domain.exceptions.validation_error import ScheduleError
from fieldops.domain.value_objects.job_schedule import Recurrence
from fieldops.domain.value_objects.job_status import JobStatus


class TestScheduleJobUseCase:
    """Test cases for ScheduleJobUseCase."""

    @pytest.fixture
    def use_case(
        self,
        mock_job_repository,
        mock_workflow_repository,
        mock_job_technician_repository,
        mock_user_repository,
        mock_transaction_service,
    ):
        engine = JobLifecycleEngine(
            mock_job_repository, mock_workflow_repository, mock_job_technician_repository
        )
        return ScheduleJobUseCase(
            engine, AuthorizationGate(mock_user_repository), mock_transaction_service
        )

    @pytest.fixture
    def start(self):
        return datetime(2026, 11, 2, 9, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_execute_success(
        self,
        use_case,
        sample_job,
        start,
        mock_job_repository,
        mock_workflow_repository,
    ):
        workflow = Workflow(job_id=sample_job.id)
        mock_job_repository.get_by_id.return_value = sample_job
        mock_workflow_repository.get_by_job_id.return_value = workflow
        mock_workflow_repository.append_step_if_absent.side_effect = (
            lambda workflow_id, status: workflow.new_step(status)
        )

        result = await use_case.execute(
            ScheduleJobRequest(
                job_id=sample_job.id,
                start_date=start,
                requested_by=uuid4(),
                recurrence=Recurrence.WEEKLY,
            )
        )

        assert result.job.status == JobStatus.SCHEDULED
        assert result.job.schedule.start_date == start
        assert result.job.schedule.end_date == start
        assert result.job.schedule.recurrence is Recurrence.WEEKLY
        assert result.step_recorded is True

    @pytest.mark.asyncio
    async def test_end_before_start_checked_before_store(
        self, use_case, start, mock_job_repository, mock_user_repository
    ):
        with pytest.raises(ScheduleError):
            await use_case.execute(
                ScheduleJobRequest(
                    job_id=uuid4(),
                    start_date=start,
                    end_date=start - timedelta(days=1),
                    requested_by=uuid4(),
                )
            )

        mock_user_repository.get_role_name.assert_not_called()
        mock_job_repository.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_job_not_found(self, use_case, start, mock_job_repository):
        mock_job_repository.get_by_id.return_value = None

        with pytest.raises(JobNotFoundError):
            await use_case.execute(
                ScheduleJobRequest(job_id=uuid4(), start_date=start, requested_by=uuid4())
            )
