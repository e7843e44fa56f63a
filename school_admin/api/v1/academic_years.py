"""
Academic year endpoints (`/config`).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from school_admin.api.deps import get_academic_year_service, get_pagination_params
from school_admin.core.pagination import PaginationParams
from school_admin.schemas.academic_year import (
    AcademicYearActivate,
    AcademicYearCreate,
    AcademicYearResponse,
    AcademicYearUpdate,
)
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.services import AcademicYearService

router = APIRouter(prefix="/config", tags=["Academic Years"])


@router.post(
    "",
    response_model=SuccessResponse[AcademicYearResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_academic_year(
    payload: AcademicYearCreate,
    service: AcademicYearService = Depends(get_academic_year_service),
):
    year = service.create(payload)
    return success_response(AcademicYearResponse.model_validate(year), 1, "Created Successfully")


@router.get("", response_model=SuccessResponse[List[AcademicYearResponse]])
def list_academic_years(
    school_id: Optional[str] = Query(None, alias="schoolId"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    pagination: PaginationParams = Depends(get_pagination_params),
    service: AcademicYearService = Depends(get_academic_year_service),
):
    years, total = service.list(school_id=school_id, is_active=is_active, pagination=pagination)
    data = [AcademicYearResponse.model_validate(year) for year in years]
    return success_response(data, total, "Fetched Successfully")


@router.get("/previous", response_model=SuccessResponse[List[AcademicYearResponse]])
def list_previous_academic_years(
    school_id: str = Query(..., alias="schoolId"),
    service: AcademicYearService = Depends(get_academic_year_service),
):
    years = service.previous(school_id)
    data = [AcademicYearResponse.model_validate(year) for year in years]
    return success_response(data, len(data), "Fetched Successfully")


@router.post("/activate", response_model=SuccessResponse[AcademicYearResponse])
def change_academic_year_state(
    payload: AcademicYearActivate,
    service: AcademicYearService = Depends(get_academic_year_service),
):
    year = service.change_state(payload)
    return success_response(AcademicYearResponse.model_validate(year), 1, "Updated Successfully")


@router.get("/{year_id}", response_model=SuccessResponse[AcademicYearResponse])
def get_academic_year(
    year_id: str,
    service: AcademicYearService = Depends(get_academic_year_service),
):
    year = service.get(year_id)
    return success_response(AcademicYearResponse.model_validate(year), 1, "Fetched Successfully")


@router.put("/{year_id}", response_model=SuccessResponse[AcademicYearResponse])
def update_academic_year(
    year_id: str,
    payload: AcademicYearUpdate,
    service: AcademicYearService = Depends(get_academic_year_service),
):
    year = service.update(year_id, payload)
    return success_response(AcademicYearResponse.model_validate(year), 1, "Updated Successfully")


@router.delete("/{year_id}", response_model=SuccessResponse[None])
def delete_academic_year(
    year_id: str,
    service: AcademicYearService = Depends(get_academic_year_service),
):
    service.delete(year_id)
    return success_response(None, 1, "Deleted Successfully")
