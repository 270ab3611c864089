"""
Common API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema whose JSON keys are camelCase; Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    status: int
    message: str
    errors: Optional[List[str]] = None


class TimestampMixin(CamelModel):
    """Mixin for timestamp fields."""

    created_at: datetime
    updated_at: Optional[datetime] = None
