"""
User SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class UserModel(BaseModel):
    """User database model. Technicians and dispatchers are users."""

    __tablename__ = "users"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100))
    email = Column(String(255), nullable=False, unique=True)
    company_id = Column(Uuid(as_uuid=True), ForeignKey("companies.id"), index=True)
    role_id = Column(Uuid(as_uuid=True), ForeignKey("roles.id"), nullable=False)

    # Relationships
    company = relationship("CompanyModel", back_populates="users")
    role = relationship("RoleModel", back_populates="users")
    job_assignments = relationship("JobTechnicianModel", back_populates="technician")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
