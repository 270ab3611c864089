"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from fieldops.domain.value_objects.job_schedule import JobSchedule
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.location import Location


@dataclass(frozen=True)
class TechnicianRef:
    """Technician as shown on a job."""

    id: UUID
    first_name: str
    last_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in [self.first_name, self.last_name] if part)


@dataclass(frozen=True)
class ClientRef:
    """Client as shown on a job."""

    id: UUID
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class JobTypeRef:
    """Job category as shown on a job."""

    id: UUID
    name: str


@dataclass
class Job:
    """Job domain entity."""

    name: str
    description: str
    job_type_id: UUID
    company_id: UUID
    client_id: UUID
    dispatcher_id: UUID
    id: UUID = field(default_factory=uuid4)
    status: JobStatus = JobStatus.CREATED
    location: Optional[Location] = None
    schedule: Optional[JobSchedule] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Read-side expansions, filled by the repository
    technicians: List[TechnicianRef] = field(default_factory=list)
    client: Optional[ClientRef] = None
    job_type: Optional[JobTypeRef] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.name or not self.name.strip():
            raise ValueError("Job name is required")
        if not self.company_id:
            raise ValueError("Job company is required")
        if not self.client_id:
            raise ValueError("Job client is required")

        self.status = JobStatus.parse(self.status)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def technician_ids(self) -> List[UUID]:
        return [technician.id for technician in self.technicians]

    def change_status(self, new_status: JobStatus) -> JobStatus:
        """Set a new status and return the previous one."""
        previous = self.status
        self.status = JobStatus.parse(new_status)
        self.touch()
        return previous

    def assign_location(self, location: Location) -> None:
        self.location = location
        self.touch()

    def set_schedule(self, schedule: JobSchedule) -> None:
        self.schedule = schedule
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
