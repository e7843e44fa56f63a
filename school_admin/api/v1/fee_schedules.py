"""
Fee schedule endpoints (`/feeschedule`).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from school_admin.api.deps import get_fee_schedule_service, get_pagination_params
from school_admin.core.pagination import PaginationParams
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.fee_schedule import FeeScheduleCreate, FeeScheduleResponse, FeeScheduleUpdate
from school_admin.services import FeeScheduleService

router = APIRouter(prefix="/feeschedule", tags=["Fee Schedules"])


@router.post(
    "",
    response_model=SuccessResponse[FeeScheduleResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_fee_schedule(
    payload: FeeScheduleCreate,
    service: FeeScheduleService = Depends(get_fee_schedule_service),
):
    schedule = service.create(payload)
    return success_response(FeeScheduleResponse.model_validate(schedule), 1, "Created Successfully")


@router.get("", response_model=SuccessResponse[List[FeeScheduleResponse]])
def list_fee_schedules(
    school_id: Optional[str] = Query(None, alias="schoolId"),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    pagination: PaginationParams = Depends(get_pagination_params),
    service: FeeScheduleService = Depends(get_fee_schedule_service),
):
    schedules, total = service.list(school_id=school_id, category_id=category_id, pagination=pagination)
    data = [FeeScheduleResponse.model_validate(item) for item in schedules]
    return success_response(data, total, "Fetched Successfully")


@router.get("/{schedule_id}", response_model=SuccessResponse[FeeScheduleResponse])
def get_fee_schedule(
    schedule_id: str,
    service: FeeScheduleService = Depends(get_fee_schedule_service),
):
    schedule = service.get(schedule_id)
    return success_response(FeeScheduleResponse.model_validate(schedule), 1, "Fetched Successfully")


@router.put("/{schedule_id}", response_model=SuccessResponse[FeeScheduleResponse])
def update_fee_schedule(
    schedule_id: str,
    payload: FeeScheduleUpdate,
    service: FeeScheduleService = Depends(get_fee_schedule_service),
):
    schedule = service.update(schedule_id, payload)
    return success_response(FeeScheduleResponse.model_validate(schedule), 1, "Updated Successfully")


@router.delete("/{schedule_id}", response_model=SuccessResponse[None])
def delete_fee_schedule(
    schedule_id: str,
    service: FeeScheduleService = Depends(get_fee_schedule_service),
):
    service.delete(schedule_id)
    return success_response(None, 1, "Deleted Successfully")
