"""
Database repositories package.
"""

from .job_repository import JobRepository
from .job_technician_repository import JobTechnicianRepository
from .job_type_repository import JobTypeRepository
from .transaction_repository import TransactionService
from .user_repository import UserRepository
from .workflow_repository import WorkflowRepository

__all__ = [
    "JobRepository",
    "JobTechnicianRepository",
    "JobTypeRepository",
    "TransactionService",
    "UserRepository",
    "WorkflowRepository",
]
