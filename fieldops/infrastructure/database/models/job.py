"""
Job SQLAlchemy model.
"""

from sqlalchemy import JSON, Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from fieldops.domain.value_objects.job_status import JobStatus

from .base import BaseModel


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        String(20), default=JobStatus.CREATED.value, nullable=False, index=True
    )

    job_type_id = Column(Uuid(as_uuid=True), ForeignKey("job_types.id"), nullable=False)
    company_id = Column(
        Uuid(as_uuid=True), ForeignKey("companies.id"), nullable=False, index=True
    )
    client_id = Column(Uuid(as_uuid=True), ForeignKey("clients.id"), nullable=False)
    dispatcher_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    # {"city", "state", "zip", "other_info"}
    location = Column(JSON, nullable=True)
    # {"start_date", "end_date", "recurrence"}
    schedule = Column(JSON, nullable=True)

    # Relationships
    company = relationship("CompanyModel", back_populates="jobs")
    client = relationship("ClientModel", back_populates="jobs")
    job_type = relationship("JobTypeModel", back_populates="jobs")
    dispatcher = relationship("UserModel", foreign_keys=[dispatcher_id])
    technician_links = relationship(
        "JobTechnicianModel",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="JobTechnicianModel.created_at",
    )
    workflows = relationship(
        "WorkflowModel", back_populates="job", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, name={self.name}, status={self.status})>"
