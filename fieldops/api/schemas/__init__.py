"""
API schemas for the FieldOps job service.
"""

from .common import ErrorResponse, MessageResponse
from .job import (
    AssignTechniciansRequestSchema,
    JobCreateRequest,
    JobMetricsResponse,
    JobResponse,
    JobStatusUpdateRequest,
    JobStatusUpdateResponse,
    JobTypeSchema,
    JobTypesCreateRequest,
    JobTypesCreateResponse,
    JobUpdateRequest,
    ScheduleJobRequestSchema,
)
from .workflow import StepResponse, WorkflowResponse

__all__ = [
    "AssignTechniciansRequestSchema",
    "ErrorResponse",
    "JobCreateRequest",
    "JobMetricsResponse",
    "JobResponse",
    "JobStatusUpdateRequest",
    "JobStatusUpdateResponse",
    "JobTypeSchema",
    "JobTypesCreateRequest",
    "JobTypesCreateResponse",
    "JobUpdateRequest",
    "MessageResponse",
    "ScheduleJobRequestSchema",
    "StepResponse",
    "WorkflowResponse",
]
