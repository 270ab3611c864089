"""
Application interfaces package.
"""

from .repositories import (
    JobRepositoryInterface,
    JobTechnicianRepositoryInterface,
    JobTypeRepositoryInterface,
    UserRepositoryInterface,
    WorkflowRepositoryInterface,
)

__all__ = [
    "JobRepositoryInterface",
    "JobTechnicianRepositoryInterface",
    "JobTypeRepositoryInterface",
    "UserRepositoryInterface",
    "WorkflowRepositoryInterface",
]
