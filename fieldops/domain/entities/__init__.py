"""
Domain entities package.
"""

from .job import ClientRef, Job, JobTypeRef, TechnicianRef
from .job_technician import JobTechnician
from .user import User
from .workflow import Step, Workflow

__all__ = [
    "ClientRef",
    "Job",
    "JobTechnician",
    "JobTypeRef",
    "Step",
    "TechnicianRef",
    "User",
    "Workflow",
]
