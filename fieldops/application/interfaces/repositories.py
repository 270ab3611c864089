"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from fieldops.domain.entities.job import Job, JobTypeRef
from fieldops.domain.entities.job_technician import JobTechnician
from fieldops.domain.entities.user import User
from fieldops.domain.entities.workflow import Step, Workflow
from fieldops.domain.value_objects.job_status import JobStatus


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID, optionally locking the row for the transaction."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Create a new job."""
        pass

    @abstractmethod
    async def update(self, job: Job) -> Job:
        """Persist the mutable fields of an existing job."""
        pass

    @abstractmethod
    async def delete(self, job_id: UUID) -> bool:
        """Delete a job."""
        pass

    @abstractmethod
    async def list_by_company(
        self, company_id: UUID, skip: int = 0, limit: int = 100
    ) -> List[Job]:
        """List jobs belonging to a company."""
        pass

    @abstractmethod
    async def list_recent_by_company(self, company_id: UUID, limit: int) -> List[Job]:
        """List the newest jobs of a company, newest first."""
        pass

    @abstractmethod
    async def count_by_status(self, company_id: UUID) -> Dict[JobStatus, int]:
        """Count a company's jobs per status."""
        pass


class WorkflowRepositoryInterface(ABC):
    """Workflow and step repository interface."""

    @abstractmethod
    async def create(self, workflow: Workflow) -> Workflow:
        """Create a workflow together with its initial steps."""
        pass

    @abstractmethod
    async def get_by_job_id(self, job_id: UUID) -> Optional[Workflow]:
        """Get the workflow of a job, steps ordered by creation."""
        pass

    @abstractmethod
    async def append_step_if_absent(
        self, workflow_id: UUID, status: JobStatus
    ) -> Optional[Step]:
        """Append a step unless one with the same status exists.

        Returns the new step, or None when the status was already recorded.
        """
        pass

    @abstractmethod
    async def list_by_company(self, company_id: UUID) -> List[Workflow]:
        """List the workflows of all jobs of a company."""
        pass

    @abstractmethod
    async def delete_by_job_id(self, job_id: UUID) -> int:
        """Delete a job's workflows and their steps."""
        pass


class JobTechnicianRepositoryInterface(ABC):
    """Job technician assignment repository interface."""

    @abstractmethod
    async def add_many(self, job_id: UUID, technician_ids: Sequence[UUID]) -> List[JobTechnician]:
        """Link technicians to a job, skipping links that already exist."""
        pass

    @abstractmethod
    async def get_by_job_id(self, job_id: UUID) -> List[JobTechnician]:
        """Get every assignment of a job."""
        pass

    @abstractmethod
    async def delete_by_job_id(self, job_id: UUID) -> int:
        """Remove every assignment of a job."""
        pass


class UserRepositoryInterface(ABC):
    """User lookup interface."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID, including the role name."""
        pass

    @abstractmethod
    async def get_many(self, user_ids: Sequence[UUID]) -> List[User]:
        """Get every user whose ID is in ``user_ids``."""
        pass

    @abstractmethod
    async def get_role_name(self, user_id: UUID) -> Optional[str]:
        """Get the name of a user's role."""
        pass


class JobTypeRepositoryInterface(ABC):
    """Job type lookup interface."""

    @abstractmethod
    async def list_all(self) -> List[JobTypeRef]:
        """List every job type."""
        pass

    @abstractmethod
    async def create_many(self, names: Sequence[str]) -> int:
        """Create job types by name, skipping names that already exist."""
        pass
