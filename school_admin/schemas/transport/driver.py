# --- File: school_admin/schemas/transport/driver.py ---
"""
Bus driver schemas.

Phone and Aadhar numbers are kept as digit strings; numeric input is
accepted and converted. Their format is checked by the service, which
answers a bad value with 400.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from school_admin.schemas.common.base import (
    BaseCreateSchema,
    BaseDBSchema,
    BaseSchema,
    BaseUpdateSchema,
)

__all__ = [
    "DriverCreate",
    "DriverUpdate",
    "DriverResponse",
    "DriverListItem",
    "DriverLookupItem",
]

_IDENTIFIER_FIELDS = ("contact_number", "emergency_number", "aadhar_number")


def _digits_as_text(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class DriverCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=150)
    contact_number: str
    emergency_number: str
    driving_license: str = Field(..., min_length=1, max_length=50)
    aadhar_number: str
    blood_group: Optional[str] = Field(default=None, max_length=10)
    address: str = Field(..., min_length=1, max_length=500)
    school_id: str
    attachments: List[str] = Field(default_factory=list)

    @field_validator(*_IDENTIFIER_FIELDS, mode="before")
    @classmethod
    def coerce_identifiers(cls, v: Any) -> Any:
        return _digits_as_text(v)


class DriverUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    contact_number: Optional[str] = None
    emergency_number: Optional[str] = None
    driving_license: Optional[str] = Field(default=None, min_length=1, max_length=50)
    aadhar_number: Optional[str] = None
    blood_group: Optional[str] = Field(default=None, max_length=10)
    address: Optional[str] = Field(default=None, max_length=500)
    attachments: Optional[List[str]] = None

    @field_validator(*_IDENTIFIER_FIELDS, mode="before")
    @classmethod
    def coerce_identifiers(cls, v: Any) -> Any:
        return _digits_as_text(v)


class DriverResponse(BaseDBSchema):
    name: str
    contact_number: str
    emergency_number: str
    driving_license: str
    aadhar_number: str
    blood_group: Optional[str] = None
    address: str
    school_id: str
    attachments: List[str] = Field(default_factory=list)


class DriverListItem(DriverResponse):
    route_names: List[str] = Field(default_factory=list, description="Routes the driver is assigned to")


class DriverLookupItem(BaseSchema):
    id: str
    name: str
