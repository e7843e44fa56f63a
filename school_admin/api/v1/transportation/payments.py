"""
Transport fee payment, month list and dashboard endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from school_admin.api.deps import get_student_transport_service, get_transport_dashboard_service
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.transport import DashboardResponse, PaymentRequest, StudentTransportResponse
from school_admin.services import StudentTransportService, TransportDashboardService

router = APIRouter()


@router.post("/payment", response_model=SuccessResponse[StudentTransportResponse])
def process_payment(
    payload: PaymentRequest,
    service: StudentTransportService = Depends(get_student_transport_service),
):
    transport = service.pay(payload)
    return success_response(StudentTransportResponse.model_validate(transport), 1, "Payment Processed Successfully")


@router.get("/months", response_model=SuccessResponse[List[str]])
def list_months():
    months = TransportDashboardService.months()
    return success_response(months, len(months), "Fetched Successfully")


@router.get("/dashboard", response_model=SuccessResponse[DashboardResponse])
def transport_dashboard(
    school_id: str = Query(..., alias="schoolId"),
    month: Optional[str] = Query(None),
    service: TransportDashboardService = Depends(get_transport_dashboard_service),
):
    return success_response(service.dashboard(school_id, month), 1, "Fetched Successfully")
