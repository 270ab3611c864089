"""
User domain entity.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class User:
    """An employee of a company: owner, dispatcher or technician."""

    id: UUID
    first_name: str
    last_name: Optional[str]
    email: str
    company_id: Optional[UUID] = None
    role_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in [self.first_name, self.last_name] if part)
