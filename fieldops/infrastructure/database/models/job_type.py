"""
Job type SQLAlchemy model.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class JobTypeModel(BaseModel):
    """Job category database model."""

    __tablename__ = "job_types"

    name = Column(String(255), nullable=False, unique=True)

    jobs = relationship("JobModel", back_populates="job_type")

    def __repr__(self) -> str:
        return f"<JobType(id={self.id}, name={self.name})>"
