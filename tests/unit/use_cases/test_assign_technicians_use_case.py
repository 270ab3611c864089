"""
Unit tests for AssignTechniciansUseCase.
"""

from uuid import uuid4

import pytest

from fieldops.application.services.authorization_gate import AuthorizationGate
from fieldops.application.services.job_lifecycle_engine import JobLifecycleEngine
from fieldops.application.use_cases.assign_technicians import (
    AssignTechniciansRequest,
    AssignTechniciansUseCase,
)
from fieldops.domain.entities.job_technician import JobTechnician
from fieldops.domain.entities.user import User
from fieldops.domain.entities.workflow import Workflow
from fieldops.domain.exceptions.not_found_error import JobNotFoundError
from fieldops.domain.exceptions.reference_error import InvalidTechnicianError
from fieldops.domain.exceptions.validation_error import RequiredFieldError
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.location import Location


def make_user(user_id):
    return User(id=user_id, first_name="Tech", last_name=None, email=f"{user_id}@x.io")


class TestAssignTechniciansUseCase:
    """Test cases for AssignTechniciansUseCase."""

    @pytest.fixture
    def technician_ids(self):
        return [uuid4(), uuid4()]

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
        return AssignTechniciansUseCase(
            job_repo=mock_job_repository,
            user_repo=mock_user_repository,
            job_technician_repo=mock_job_technician_repository,
            lifecycle_engine=engine,
            authorization_gate=AuthorizationGate(mock_user_repository),
            transaction_service=mock_transaction_service,
        )

    @pytest.fixture
    def prepared_mocks(
        self,
        sample_job,
        technician_ids,
        mock_job_repository,
        mock_workflow_repository,
        mock_job_technician_repository,
        mock_user_repository,
    ):
        workflow = Workflow(job_id=sample_job.id)
        workflow.steps.append(workflow.new_step(JobStatus.CREATED))

        mock_job_repository.get_by_id.return_value = sample_job
        mock_workflow_repository.get_by_job_id.return_value = workflow
        mock_workflow_repository.append_step_if_absent.side_effect = (
            lambda workflow_id, status: workflow.new_step(status)
        )
        mock_user_repository.get_many.side_effect = lambda ids: [make_user(i) for i in ids]
        mock_job_technician_repository.add_many.side_effect = lambda job_id, ids: [
            JobTechnician(job_id=job_id, technician_id=i) for i in ids
        ]
        return workflow

    @pytest.mark.asyncio
    async def test_execute_success(
        self,
        use_case,
        prepared_mocks,
        sample_job,
        technician_ids,
        mock_job_technician_repository,
    ):
        location = Location(city="Austin", state="TX", zip="78701", other_info="Gate 2")

        result = await use_case.execute(
            AssignTechniciansRequest(
                job_id=sample_job.id,
                technician_ids=technician_ids + [technician_ids[0]],
                requested_by=uuid4(),
                location=location,
            )
        )

        assert result.job.status == JobStatus.ASSIGNED
        assert result.job.location == location
        assert result.transition.step_recorded is True
        assert [a.technician_id for a in result.assignments] == technician_ids
        # Duplicates are collapsed before insert
        mock_job_technician_repository.add_many.assert_called_once_with(
            sample_job.id, technician_ids
        )

    @pytest.mark.asyncio
    async def test_execute_unknown_technician(
        self,
        use_case,
        prepared_mocks,
        sample_job,
        technician_ids,
        mock_user_repository,
        mock_job_technician_repository,
        mock_transaction_service,
    ):
        mock_user_repository.get_many.side_effect = lambda ids: [make_user(technician_ids[0])]

        with pytest.raises(InvalidTechnicianError) as exc_info:
            await use_case.execute(
                AssignTechniciansRequest(
                    job_id=sample_job.id,
                    technician_ids=technician_ids,
                    requested_by=uuid4(),
                )
            )

        assert str(exc_info.value) == "One or more technician IDs are invalid"
        assert exc_info.value.missing_ids == [str(technician_ids[1])]
        mock_transaction_service.execute_in_transaction.assert_not_called()
        mock_job_technician_repository.add_many.assert_not_called()
        assert sample_job.status == JobStatus.CREATED

    @pytest.mark.asyncio
    async def test_execute_job_not_found(self, use_case, mock_job_repository):
        mock_job_repository.get_by_id.return_value = None

        with pytest.raises(JobNotFoundError):
            await use_case.execute(
                AssignTechniciansRequest(
                    job_id=uuid4(), technician_ids=[uuid4()], requested_by=uuid4()
                )
            )

    @pytest.mark.asyncio
    async def test_execute_requires_technicians(self, use_case, mock_user_repository):
        with pytest.raises(RequiredFieldError):
            await use_case.execute(
                AssignTechniciansRequest(job_id=uuid4(), technician_ids=[], requested_by=uuid4())
            )

        mock_user_repository.get_role_name.assert_not_called()
