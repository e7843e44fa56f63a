# --- File: school_admin/schemas/academic_year.py ---
"""
Academic year request and response schemas.

Dates arrive as `DD/MM/YYYY` strings and are parsed by the service so a
malformed value is answered with the same 422 as a missing one.
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
    "AcademicYearCreate",
    "AcademicYearUpdate",
    "AcademicYearActivate",
    "AcademicYearResponse",
]


class AcademicYearCreate(BaseCreateSchema):
    name: Optional[str] = Field(default=None, max_length=50, description="Display name, e.g. 2023-2024")
    start_date: Optional[str] = Field(default=None, description="First day, DD/MM/YYYY")
    end_date: Optional[str] = Field(default=None, description="Last day, DD/MM/YYYY")
    school_id: Optional[str] = Field(default=None, description="Owning school")


class AcademicYearUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, max_length=50)
    start_date: Optional[str] = Field(default=None, description="DD/MM/YYYY")
    end_date: Optional[str] = Field(default=None, description="DD/MM/YYYY")
    school_id: Optional[str] = None
    is_active: Optional[bool] = None


class AcademicYearActivate(BaseSchema):
    """Body of the change-state call."""

    id: Optional[str] = Field(default=None, description="Academic year to update")
    is_active: Optional[bool] = Field(default=None, description="Desired state")


class AcademicYearResponse(BaseDBSchema):
    name: str
    start_date: Date
    end_date: Date
    months: List[int] = Field(default_factory=list, description="Month numbers covered, in order")
    school_id: str
    is_active: bool
