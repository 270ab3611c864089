"""
Job-related API schemas.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from fieldops.application.use_cases.update_job import JobUpdate
from fieldops.domain.entities.job import Job
from fieldops.domain.value_objects.job_schedule import JobSchedule, Recurrence
from fieldops.domain.value_objects.job_status import JobStatus
from fieldops.domain.value_objects.location import Location

from .common import CamelModel, TimestampMixin
from .workflow import WorkflowResponse


class LocationSchema(CamelModel):
    """Location schema."""

    model_config = ConfigDict(str_strip_whitespace=True)

    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip: str = Field(..., min_length=1, max_length=20)
    other_info: Optional[str] = Field(None, max_length=1000)

    def to_value_object(self) -> Location:
        return Location(
            city=self.city, state=self.state, zip=self.zip, other_info=self.other_info
        )

    @classmethod
    def from_value_object(cls, location: Optional[Location]) -> Optional["LocationSchema"]:
        if location is None:
            return None
        return cls(
            city=location.city,
            state=location.state,
            zip=location.zip,
            other_info=location.other_info,
        )


class JobScheduleSchema(CamelModel):
    """Job schedule schema. End date checks happen in the domain."""

    start_date: datetime
    end_date: Optional[datetime] = None
    recurrence: Optional[Recurrence] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_validator("recurrence", mode="before")
    @classmethod
    def normalize_recurrence(cls, v):
        return v.upper() if isinstance(v, str) else v

    def to_value_object(self) -> JobSchedule:
        return JobSchedule(
            start_date=self.start_date,
            end_date=self.end_date,
            recurrence=self.recurrence,
        )

    @classmethod
    def from_value_object(cls, schedule: Optional[JobSchedule]) -> Optional["JobScheduleSchema"]:
        if schedule is None:
            return None
        return cls(
            start_date=schedule.start_date,
            end_date=schedule.end_date,
            recurrence=schedule.recurrence,
        )


class JobCreateRequest(CamelModel):
    """Job creation request schema."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=5000)
    job_type_id: UUID
    client_id: UUID
    company_id: UUID
    dispatcher_id: UUID
    location: Optional[LocationSchema] = None


class AssignTechniciansRequestSchema(CamelModel):
    """Technician assignment request schema."""

    technician_ids: List[UUID] = Field(..., min_length=1)
    location: Optional[LocationSchema] = None


class ScheduleJobRequestSchema(CamelModel):
    """Schedule request schema."""

    job_schedule: JobScheduleSchema


class JobStatusUpdateRequest(CamelModel):
    """Status change request. Unknown statuses are rejected by the domain."""

    status: str = Field(..., min_length=1)


class JobUpdateRequest(CamelModel):
    """Job update request schema. Omitted fields are left unchanged."""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    job_type_id: Optional[UUID] = None
    client_id: Optional[UUID] = None
    dispatcher_id: Optional[UUID] = None
    location: Optional[LocationSchema] = None
    job_schedule: Optional[JobScheduleSchema] = None
    technician_ids: Optional[List[UUID]] = None
    status: Optional[str] = None

    def to_job_update(self) -> JobUpdate:
        return JobUpdate(
            name=self.name,
            description=self.description,
            job_type_id=self.job_type_id,
            client_id=self.client_id,
            dispatcher_id=self.dispatcher_id,
            location=self.location.to_value_object() if self.location else None,
            schedule=self.job_schedule.to_value_object() if self.job_schedule else None,
            technician_ids=self.technician_ids,
            status=self.status,
        )


class TechnicianSchema(CamelModel):
    id: UUID
    first_name: str
    last_name: Optional[str] = None
    full_name: str


class ClientSchema(CamelModel):
    id: UUID
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None


class JobTypeSchema(CamelModel):
    id: UUID
    name: str


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: UUID
    name: str
    description: Optional[str] = None
    status: JobStatus
    job_type_id: Optional[UUID] = None
    company_id: UUID
    client_id: UUID
    dispatcher_id: Optional[UUID] = None
    location: Optional[LocationSchema] = None
    job_schedule: Optional[JobScheduleSchema] = None
    technicians: List[TechnicianSchema] = []
    client: Optional[ClientSchema] = None
    job_type: Optional[JobTypeSchema] = None

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            name=job.name,
            description=job.description,
            status=job.status,
            job_type_id=job.job_type_id,
            company_id=job.company_id,
            client_id=job.client_id,
            dispatcher_id=job.dispatcher_id,
            location=LocationSchema.from_value_object(job.location),
            job_schedule=JobScheduleSchema.from_value_object(job.schedule),
            technicians=[
                TechnicianSchema(
                    id=technician.id,
                    first_name=technician.first_name,
                    last_name=technician.last_name,
                    full_name=technician.full_name,
                )
                for technician in job.technicians
            ],
            client=(
                ClientSchema(
                    id=job.client.id,
                    first_name=job.client.first_name,
                    last_name=job.client.last_name,
                    email=job.client.email,
                )
                if job.client
                else None
            ),
            job_type=(
                JobTypeSchema(id=job.job_type.id, name=job.job_type.name)
                if job.job_type
                else None
            ),
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class JobStatusUpdateResponse(CamelModel):
    """A job after a status change, with its workflow."""

    job: JobResponse
    workflow: WorkflowResponse
    previous_status: JobStatus
    step_recorded: bool


class JobMetricsResponse(CamelModel):
    """Job counts per status for a company."""

    company_id: UUID
    counts: Dict[str, int]
    total: int
    active: int


class JobTypesCreateRequest(CamelModel):
    """Bulk job type creation request."""

    job_types: List[str]


class JobTypesCreateResponse(CamelModel):
    message: str
    created: int
