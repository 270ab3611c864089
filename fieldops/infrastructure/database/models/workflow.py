"""
Workflow and step SQLAlchemy models.
"""

from sqlalchemy import Column, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import relationship

from fieldops.domain.value_objects.workflow_type import WorkflowType

from .base import BaseModel


class WorkflowModel(BaseModel):
    """Workflow database model."""

    __tablename__ = "workflows"

    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, unique=True, index=True
    )
    type = Column(String(20), default=WorkflowType.JOB.value, nullable=False)

    job = relationship("JobModel", back_populates="workflows")
    steps = relationship(
        "StepModel",
        back_populates="workflow",
        cascade="all, delete-orphan",
        order_by="StepModel.created_at",
    )

    def __repr__(self) -> str:
        return f"<Workflow(id={self.id}, job_id={self.job_id})>"


class StepModel(BaseModel):
    """Workflow step database model. Rows are inserted, never updated."""

    __tablename__ = "steps"

    workflow_id = Column(
        Uuid(as_uuid=True), ForeignKey("workflows.id"), nullable=False, index=True
    )
    status = Column(String(20), nullable=False)

    workflow = relationship("WorkflowModel", back_populates="steps")

    __table_args__ = (
        # One step per status per workflow
        Index("idx_step_workflow_status_unique", "workflow_id", "status", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Step(id={self.id}, workflow_id={self.workflow_id}, status={self.status})>"
