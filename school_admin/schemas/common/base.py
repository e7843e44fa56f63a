"""
Shared pydantic bases.

Every schema speaks camelCase on the wire and also accepts snake_case input,
so services and tests can build payloads with Python names.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Set

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "TimestampMixin",
    "BaseDBSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
]


class BaseSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class TimestampMixin(BaseModel):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BaseDBSchema(BaseSchema, TimestampMixin):
    """Read model for a persisted row."""

    id: str


class BaseCreateSchema(BaseSchema):
    pass


class BaseUpdateSchema(BaseSchema):
    """Partial update: only fields the client actually sent are applied."""

    def changes(self, exclude: Optional[Set[str]] = None) -> Dict[str, Any]:
        # Explicit nulls mean "leave unchanged", not "clear"
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude=exclude)
