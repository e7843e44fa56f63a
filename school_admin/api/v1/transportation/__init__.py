"""
Transportation endpoints, mounted under `/transportation`.
"""

from fastapi import APIRouter

from school_admin.api.v1.transportation import drivers, payments, routes, students, vehicles

router = APIRouter(prefix="/transportation")

router.include_router(vehicles.router, tags=["Transport - Vehicles"])
router.include_router(drivers.router, tags=["Transport - Drivers"])
router.include_router(routes.router, tags=["Transport - Routes"])
router.include_router(students.router, tags=["Transport - Students"])
router.include_router(payments.router, tags=["Transport - Payments"])

__all__ = ["router"]
