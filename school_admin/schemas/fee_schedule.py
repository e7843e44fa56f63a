# --- File: school_admin/schemas/fee_schedule.py ---
"""
Fee schedule schemas.

`existMonths` is the month list of the active academic year as the client
shows it; its first element decides which calendar year a target month
falls in.
"""

from __future__ import annotations

from datetime import date as Date
from typing import List, Optional

from pydantic import Field, field_validator

from school_admin.schemas.common.base import BaseCreateSchema, BaseDBSchema, BaseUpdateSchema

__all__ = [
    "FeeScheduleCreate",
    "FeeScheduleUpdate",
    "FeeScheduleResponse",
]


def _check_months(value: Optional[List[int]]) -> Optional[List[int]]:
    if value is not None and any(month < 1 or month > 12 for month in value):
        raise ValueError("Months must be between 1 and 12")
    return value


class FeeScheduleCreate(BaseCreateSchema):
    schedule_name: Optional[str] = Field(default=None, max_length=150)
    description: str = Field(default="", max_length=500)
    school_id: Optional[str] = None
    day: Optional[int] = Field(default=None, ge=1, le=31, description="Day of month the fee falls due")
    months: Optional[List[int]] = Field(default=None, description="Target month numbers")
    exist_months: Optional[List[int]] = Field(default=None, description="Months of the academic year")
    category_id: Optional[str] = None

    @field_validator("months", "exist_months")
    @classmethod
    def validate_months(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        return _check_months(v)


class FeeScheduleUpdate(BaseUpdateSchema):
    schedule_name: Optional[str] = Field(default=None, max_length=150)
    description: Optional[str] = Field(default=None, max_length=500)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    months: Optional[List[int]] = None
    exist_months: Optional[List[int]] = None
    category_id: Optional[str] = None

    @field_validator("months", "exist_months")
    @classmethod
    def validate_months(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        return _check_months(v)


class FeeScheduleResponse(BaseDBSchema):
    schedule_name: str
    description: str = ""
    academic_year_id: str
    day: int
    months: List[int] = Field(default_factory=list)
    category_id: str
    school_id: str
    scheduled_dates: List[Date] = Field(default_factory=list)
