"""
Database models package.
"""

from .base import Base, BaseModel
from .client import ClientModel
from .company import CompanyModel
from .job import JobModel
from .job_technician import JobTechnicianModel
from .job_type import JobTypeModel
from .role import RoleModel
from .user import UserModel
from .workflow import StepModel, WorkflowModel

__all__ = [
    "Base",
    "BaseModel",
    "ClientModel",
    "CompanyModel",
    "JobModel",
    "JobTechnicianModel",
    "JobTypeModel",
    "RoleModel",
    "StepModel",
    "UserModel",
    "WorkflowModel",
]
