"""
Use cases package.

This package contains the use cases that orchestrate the lifecycle engine,
the authorization gate and the repositories.
"""

from .assign_technicians import AssignTechniciansRequest, AssignTechniciansUseCase
from .create_job import CreateJobRequest, CreateJobUseCase
from .delete_job import DeleteJobUseCase
from .job_queries import JobQueryService, JobStatusCounts
from .manage_job_types import ManageJobTypesUseCase
from .schedule_job import ScheduleJobRequest, ScheduleJobUseCase
from .update_job import JobUpdate, UpdateJobRequest, UpdateJobUseCase
from .update_job_status import UpdateJobStatusRequest, UpdateJobStatusUseCase

__all__ = [
    "AssignTechniciansRequest",
    "AssignTechniciansUseCase",
    "CreateJobRequest",
    "CreateJobUseCase",
    "DeleteJobUseCase",
    "JobQueryService",
    "JobStatusCounts",
    "JobUpdate",
    "ManageJobTypesUseCase",
    "ScheduleJobRequest",
    "ScheduleJobUseCase",
    "UpdateJobRequest",
    "UpdateJobStatusRequest",
    "UpdateJobStatusUseCase",
    "UpdateJobUseCase",
]
