"""
Client SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class ClientModel(BaseModel):
    """Client (customer) database model."""

    __tablename__ = "clients"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100))
    email = Column(String(255))
    company_id = Column(
        Uuid(as_uuid=True), ForeignKey("companies.id"), nullable=False, index=True
    )

    company = relationship("CompanyModel", back_populates="clients")
    jobs = relationship("JobModel", back_populates="client")

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, email={self.email})>"
