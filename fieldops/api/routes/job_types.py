"""Job type API endpoints."""

from typing import List

from fastapi import APIRouter, status

from fieldops.api.dependencies import CurrentUserId, ManageJobTypesUseCaseDep
from fieldops.api.schemas.job import (
    JobTypeSchema,
    JobTypesCreateRequest,
    JobTypesCreateResponse,
)

router = APIRouter(prefix="/jobtypes", tags=["job types"])


@router.get("", response_model=List[JobTypeSchema])
async def list_job_types(user_id: CurrentUserId, use_case: ManageJobTypesUseCaseDep):
    job_types = await use_case.list_job_types()
    return [JobTypeSchema(id=job_type.id, name=job_type.name) for job_type in job_types]


@router.post(
    "", response_model=JobTypesCreateResponse, status_code=status.HTTP_201_CREATED
)
async def create_job_types(
    payload: JobTypesCreateRequest,
    user_id: CurrentUserId,
    use_case: ManageJobTypesUseCaseDep,
):
    """Create job types in bulk. Names that already exist are skipped."""
    created = await use_case.create_job_types(payload.job_types)
    return JobTypesCreateResponse(message="Job types added successfully", created=created)
