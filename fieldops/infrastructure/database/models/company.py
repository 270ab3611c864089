"""
Company SQLAlchemy model.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class CompanyModel(BaseModel):
    """Company database model."""

    __tablename__ = "companies"

    name = Column(String(255), nullable=False)

    # Relationships
    users = relationship("UserModel", back_populates="company")
    clients = relationship("ClientModel", back_populates="company")
    jobs = relationship("JobModel", back_populates="company")

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name={self.name})>"
