# --- File: school_admin/schemas/fee_type.py ---
"""
Fee type schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from school_admin.models.enums import AccountType, FeeCategory
from school_admin.schemas.common.base import BaseCreateSchema, BaseDBSchema, BaseUpdateSchema

__all__ = [
    "FeeTypeCreate",
    "FeeTypeUpdate",
    "FeeTypeResponse",
]


class FeeTypeCreate(BaseCreateSchema):
    fee_type: Optional[str] = Field(default=None, max_length=150, description="Fee head name")
    account_type: Optional[AccountType] = Field(default=None, description="Ledger account the fee books to")
    school_id: Optional[str] = None
    description: str = Field(default="", max_length=500)
    category_id: Optional[str] = Field(default=None, description="Fee category reference")
    fee_category: Optional[FeeCategory] = None
    is_misc: bool = Field(default=False, description="Miscellaneous fee; forces the MISCELLANEOUS category")


class FeeTypeUpdate(BaseUpdateSchema):
    fee_type: Optional[str] = Field(default=None, max_length=150)
    description: Optional[str] = Field(default=None, max_length=500)
    account_type: Optional[AccountType] = None
    fee_category: Optional[FeeCategory] = None
    category_id: Optional[str] = None
    academic_year_id: Optional[str] = None


class FeeTypeResponse(BaseDBSchema):
    fee_type: str
    description: str = ""
    account_type: AccountType
    fee_category: Optional[FeeCategory] = None
    category_id: Optional[str] = None
    academic_year_id: str
    school_id: str
    is_misc: bool = False
