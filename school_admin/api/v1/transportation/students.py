"""
Student transport assignment endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from school_admin.api.deps import get_pagination_params, get_student_transport_service
from school_admin.core.pagination import PaginationParams
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.transport import (
    StudentTransportCreate,
    StudentTransportDetail,
    StudentTransportListItem,
    StudentTransportResponse,
    StudentTransportUpdate,
)
from school_admin.services import StudentTransportService

router = APIRouter(prefix="/students")


@router.post("", response_model=SuccessResponse[StudentTransportResponse])
def add_student_transport(
    payload: StudentTransportCreate,
    service: StudentTransportService = Depends(get_student_transport_service),
):
    transport = service.add(payload)
    return success_response(
        StudentTransportResponse.model_validate(transport), 1, "Student Transport Added Successfully"
    )


@router.get("", response_model=SuccessResponse[List[StudentTransportListItem]])
def list_student_transports(
    school_id: Optional[str] = Query(None, alias="schoolId"),
    class_id: Optional[str] = Query(None, alias="classId"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    pagination: PaginationParams = Depends(get_pagination_params),
    service: StudentTransportService = Depends(get_student_transport_service),
):
    items, total = service.list(
        school_id=school_id,
        class_id=class_id,
        search_query=search_query,
        pagination=pagination,
    )
    return success_response(items, total, "Fetched Successfully")


@router.get("/{transport_id}", response_model=SuccessResponse[StudentTransportDetail])
def get_student_transport(
    transport_id: str,
    service: StudentTransportService = Depends(get_student_transport_service),
):
    return success_response(service.get(transport_id), 1, "Fetched Successfully")


@router.put("/{transport_id}", response_model=SuccessResponse[StudentTransportResponse])
def update_student_transport(
    transport_id: str,
    payload: StudentTransportUpdate,
    service: StudentTransportService = Depends(get_student_transport_service),
):
    transport = service.update(transport_id, payload)
    return success_response(StudentTransportResponse.model_validate(transport), 1, "Updated Successfully")


@router.delete("/{transport_id}", response_model=SuccessResponse[None])
def delete_student_transport(
    transport_id: str,
    service: StudentTransportService = Depends(get_student_transport_service),
):
    service.delete(transport_id)
    return success_response(None, 1, "Deleted Successfully")
