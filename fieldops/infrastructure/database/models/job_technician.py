"""
Job technician assignment SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class JobTechnicianModel(BaseModel):
    """Join table between jobs and the users assigned to them."""

    __tablename__ = "job_technicians"

    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True)
    technician_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )

    job = relationship("JobModel", back_populates="technician_links")
    technician = relationship("UserModel", back_populates="job_assignments")

    __table_args__ = (
        # A technician is linked to a job at most once
        Index("idx_job_technician_unique", "job_id", "technician_id", unique=True),
    )

    def __repr__(self) -> str:
        return f"<JobTechnician(job_id={self.job_id}, technician_id={self.technician_id})>"
