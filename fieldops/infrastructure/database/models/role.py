"""
Role SQLAlchemy model.
"""

from sqlalchemy import JSON, Column, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class RoleModel(BaseModel):
    """Role database model."""

    __tablename__ = "roles"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)
    permissions = Column(JSON, default=dict)

    users = relationship("UserModel", back_populates="role")

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
