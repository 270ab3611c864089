"""Workflow API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter

from fieldops.api.dependencies import CurrentUserId, JobQueryServiceDep
from fieldops.api.schemas.workflow import WorkflowResponse

router = APIRouter(tags=["workflows"])


@router.get("/{company_id}/workflow", response_model=List[WorkflowResponse])
async def company_workflows(
    company_id: UUID,
    user_id: CurrentUserId,
    queries: JobQueryServiceDep,
):
    """Workflows and steps of every job of a company."""
    workflows = await queries.company_workflows(company_id)
    return [WorkflowResponse.from_entity(workflow) for workflow in workflows]


@router.get("/{job_id}/jobworkflow", response_model=WorkflowResponse)
async def job_workflow(
    job_id: UUID,
    user_id: CurrentUserId,
    queries: JobQueryServiceDep,
):
    """The workflow of one job."""
    return WorkflowResponse.from_entity(await queries.job_workflow(job_id))
