"""
Job location value object.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fieldops.domain.exceptions.validation_error import RequiredFieldError


@dataclass(frozen=True)
class Location:
    """Where the job is carried out."""

    city: str
    state: str
    zip: str
    other_info: Optional[str] = None

    def __post_init__(self):
        """Validate location fields."""
        for field_name in ("city", "state", "zip"):
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise RequiredFieldError(f"location.{field_name}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "other_info": self.other_info,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Location"]:
        """Build a location from its stored form."""
        if not data:
            return None
        return cls(
            city=data.get("city", ""),
            state=data.get("state", ""),
            zip=data.get("zip", ""),
            other_info=data.get("other_info"),
        )
