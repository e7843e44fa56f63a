"""
API v1 router aggregation.
"""

from fastapi import APIRouter

from school_admin.api.v1 import academic_years, fee_schedules, fee_types, transportation

api_router = APIRouter()

api_router.include_router(academic_years.router)
api_router.include_router(fee_types.router)
api_router.include_router(fee_schedules.router)
api_router.include_router(transportation.router)

__all__ = ["api_router"]
