"""Job management API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Query, status

from fieldops.api.dependencies import (
    AssignTechniciansUseCaseDep,
    CreateJobUseCaseDep,
    CurrentUserId,
    DeleteJobUseCaseDep,
    JobQueryServiceDep,
    ScheduleJobUseCaseDep,
    UpdateJobStatusUseCaseDep,
    UpdateJobUseCaseDep,
)
from fieldops.api.schemas.common import MessageResponse
from fieldops.api.schemas.job import (
    AssignTechniciansRequestSchema,
    JobCreateRequest,
    JobMetricsResponse,
    JobResponse,
    JobStatusUpdateRequest,
    JobStatusUpdateResponse,
    JobUpdateRequest,
    ScheduleJobRequestSchema,
)
from fieldops.api.schemas.workflow import WorkflowResponse
from fieldops.application.services.job_lifecycle_engine import TransitionResult
from fieldops.application.use_cases.assign_technicians import AssignTechniciansRequest
from fieldops.application.use_cases.create_job import CreateJobRequest
from fieldops.application.use_cases.schedule_job import ScheduleJobRequest
from fieldops.application.use_cases.update_job import UpdateJobRequest
from fieldops.application.use_cases.update_job_status import UpdateJobStatusRequest
from fieldops.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["jobs"])


def _transition_response(result: TransitionResult) -> JobStatusUpdateResponse:
    return JobStatusUpdateResponse(
        job=JobResponse.from_entity(result.job),
        workflow=WorkflowResponse.from_entity(result.workflow),
        previous_status=result.previous_status,
        step_recorded=result.step_recorded,
    )


@router.post("/job", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest,
    user_id: CurrentUserId,
    use_case: CreateJobUseCaseDep,
):
    """Create a job; its workflow starts with a CREATED step."""
    result = await use_case.execute(
        CreateJobRequest(
            name=job_data.name,
            description=job_data.description,
            job_type_id=job_data.job_type_id,
            company_id=job_data.company_id,
            client_id=job_data.client_id,
            dispatcher_id=job_data.dispatcher_id,
            location=job_data.location.to_value_object() if job_data.location else None,
            requested_by=user_id,
        )
    )
    return JobResponse.from_entity(result.job)


@router.put("/assign/{job_id}", response_model=JobResponse)
async def assign_technicians(
    job_id: UUID,
    assignment: AssignTechniciansRequestSchema,
    user_id: CurrentUserId,
    use_case: AssignTechniciansUseCaseDep,
):
    """Assign technicians and a location to a job; the job becomes ASSIGNED."""
    result = await use_case.execute(
        AssignTechniciansRequest(
            job_id=job_id,
            technician_ids=assignment.technician_ids,
            location=(
                assignment.location.to_value_object() if assignment.location else None
            ),
            requested_by=user_id,
        )
    )
    return JobResponse.from_entity(result.job)


@router.put("/{job_id}/schedulejob", response_model=JobResponse)
async def schedule_job(
    job_id: UUID,
    schedule_data: ScheduleJobRequestSchema,
    user_id: CurrentUserId,
    use_case: ScheduleJobUseCaseDep,
):
    """Set a job's schedule; the job becomes SCHEDULED."""
    schedule = schedule_data.job_schedule
    result = await use_case.execute(
        ScheduleJobRequest(
            job_id=job_id,
            start_date=schedule.start_date,
            end_date=schedule.end_date,
            recurrence=schedule.recurrence,
            requested_by=user_id,
        )
    )
    return JobResponse.from_entity(result.job)


@router.patch("/{job_id}/updatejobstatus", response_model=JobStatusUpdateResponse)
async def update_job_status(
    job_id: UUID,
    status_data: JobStatusUpdateRequest,
    user_id: CurrentUserId,
    use_case: UpdateJobStatusUseCaseDep,
):
    """Move a job to any status allowed by the configured transition policy."""
    result = await use_case.execute(
        UpdateJobStatusRequest(job_id=job_id, status=status_data.status, requested_by=user_id)
    )
    return _transition_response(result)


@router.put("/{job_id}/updatejob", response_model=JobResponse)
async def update_job(
    job_id: UUID,
    job_data: JobUpdateRequest,
    user_id: CurrentUserId,
    use_case: UpdateJobUseCaseDep,
):
    """Replace the given fields of a job."""
    result = await use_case.execute(
        UpdateJobRequest(
            job_id=job_id, changes=job_data.to_job_update(), requested_by=user_id
        )
    )
    return JobResponse.from_entity(result.job)


@router.delete("/{job_id}/deletejob", response_model=MessageResponse)
async def delete_job(
    job_id: UUID,
    user_id: CurrentUserId,
    use_case: DeleteJobUseCaseDep,
):
    """Delete a job with its technician assignments and workflow."""
    await use_case.execute(job_id, requested_by=user_id)
    return MessageResponse(message="Job deleted successfully")


@router.get("/{job_id}/retrievejob", response_model=JobResponse)
async def retrieve_job(
    job_id: UUID,
    user_id: CurrentUserId,
    queries: JobQueryServiceDep,
):
    """Get a job with its client, technicians and job type."""
    return JobResponse.from_entity(await queries.get_job(job_id))


@router.get("/{company_id}/retrievejobs", response_model=List[JobResponse])
async def retrieve_jobs(
    company_id: UUID,
    user_id: CurrentUserId,
    queries: JobQueryServiceDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """List the jobs of a company."""
    jobs = await queries.list_company_jobs(company_id, skip=skip, limit=limit)
    return [JobResponse.from_entity(job) for job in jobs]


@router.get("/{company_id}/jobfeed", response_model=List[JobResponse])
async def job_feed(
    company_id: UUID,
    user_id: CurrentUserId,
    queries: JobQueryServiceDep,
):
    """The newest jobs of a company."""
    jobs = await queries.job_feed(company_id)
    return [JobResponse.from_entity(job) for job in jobs]


@router.get("/{company_id}/jobmetrics", response_model=JobMetricsResponse)
async def job_metrics(
    company_id: UUID,
    user_id: CurrentUserId,
    queries: JobQueryServiceDep,
):
    """Job counts per status for a company."""
    result = await queries.status_counts(company_id)
    return JobMetricsResponse(
        company_id=company_id,
        counts={job_status.value: count for job_status, count in result.counts.items()},
        total=result.total,
        active=result.active,
    )
