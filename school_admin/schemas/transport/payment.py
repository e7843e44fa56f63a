# --- File: school_admin/schemas/transport/payment.py ---
"""
Transport fee payment schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from school_admin.models.enums import PaymentStatus
from school_admin.schemas.common.base import BaseSchema

__all__ = ["PaymentRequest"]


class PaymentRequest(BaseSchema):
    student_id: str
    fee_detail_id: str = Field(..., description="Ledger entry being paid")
    status: PaymentStatus
    paid_amount: Decimal = Field(..., ge=Decimal("0"))
    payment_method: str = Field(..., min_length=1, max_length=30)
    created_by: Optional[str] = None
    bank_name: Optional[str] = Field(default=None, max_length=100)
    transaction_id: Optional[str] = Field(default=None, max_length=100)
    transaction_date: datetime
