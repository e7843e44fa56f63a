# --- File: school_admin/schemas/transport/vehicle.py ---
"""
School vehicle schemas.
"""

from __future__ import annotations

from datetime import date as Date
from typing import List, Optional

from pydantic import Field

from school_admin.schemas.common.base import (
    BaseCreateSchema,
    BaseDBSchema,
    BaseSchema,
    BaseUpdateSchema,
)

__all__ = [
    "VehicleCreate",
    "VehicleUpdate",
    "VehicleResponse",
    "VehicleListItem",
    "VehicleNumberItem",
    "VehicleAttachments",
]


class VehicleCreate(BaseCreateSchema):
    registration_number: str = Field(..., min_length=1, max_length=30)
    assigned_vehicle_number: int = Field(..., ge=1, description="Fleet number painted on the vehicle")
    seating_capacity: int = Field(..., ge=1)
    tax_valid: str = Field(..., description="Road tax expiry, DD/MM/YYYY")
    fc_valid: str = Field(..., description="Fitness certificate expiry, DD/MM/YYYY")
    vehicle_mode: str = Field(..., min_length=1, max_length=50)
    school_id: str
    attachments: List[str] = Field(default_factory=list)


class VehicleUpdate(BaseUpdateSchema):
    registration_number: Optional[str] = Field(default=None, min_length=1, max_length=30)
    assigned_vehicle_number: Optional[int] = Field(default=None, ge=1)
    seating_capacity: Optional[int] = Field(default=None, ge=1)
    tax_valid: Optional[str] = Field(default=None, description="DD/MM/YYYY")
    fc_valid: Optional[str] = Field(default=None, description="DD/MM/YYYY")
    vehicle_mode: Optional[str] = Field(default=None, max_length=50)
    attachments: Optional[List[str]] = None


class VehicleResponse(BaseDBSchema):
    registration_number: str
    assigned_vehicle_number: int
    seating_capacity: int
    tax_valid: Date
    fc_valid: Date
    vehicle_mode: str
    school_id: str
    attachments: List[str] = Field(default_factory=list)


class VehicleListItem(VehicleResponse):
    route_names: List[str] = Field(default_factory=list, description="Routes served by the vehicle")


class VehicleNumberItem(BaseSchema):
    id: str
    registration_number: str
    assigned_vehicle_number: int


class VehicleAttachments(BaseSchema):
    id: str
    attachments: List[str] = Field(default_factory=list)
