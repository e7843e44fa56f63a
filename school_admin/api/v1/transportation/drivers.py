"""
Bus driver endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from school_admin.api.deps import get_driver_service, get_pagination_params
from school_admin.core.pagination import PaginationParams
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.transport import (
    DriverCreate,
    DriverListItem,
    DriverLookupItem,
    DriverResponse,
    DriverUpdate,
)
from school_admin.services import DriverService

router = APIRouter(prefix="/drivers")


@router.post("", response_model=SuccessResponse[DriverResponse])
def add_driver(
    payload: DriverCreate,
    service: DriverService = Depends(get_driver_service),
):
    driver = service.add(payload)
    return success_response(DriverResponse.model_validate(driver), 1, "Driver Added Successfully")


@router.get("", response_model=SuccessResponse[List[DriverListItem]])
def list_drivers(
    school_id: str = Query(..., alias="schoolId"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    pagination: PaginationParams = Depends(get_pagination_params),
    service: DriverService = Depends(get_driver_service),
):
    items, total = service.list(school_id=school_id, search_query=search_query, pagination=pagination)
    return success_response(items, total, "Fetched Successfully")


@router.get("/lookup", response_model=SuccessResponse[List[DriverLookupItem]])
def driver_lookup(
    school_id: str = Query(..., alias="schoolId"),
    service: DriverService = Depends(get_driver_service),
):
    data = [DriverLookupItem.model_validate(driver) for driver in service.lookup(school_id)]
    return success_response(data, len(data), "Fetched Successfully")


@router.get("/{driver_id}", response_model=SuccessResponse[DriverResponse])
def get_driver(
    driver_id: str,
    service: DriverService = Depends(get_driver_service),
):
    driver = service.get(driver_id)
    return success_response(DriverResponse.model_validate(driver), 1, "Fetched Successfully")


@router.put("/{driver_id}", response_model=SuccessResponse[DriverResponse])
def update_driver(
    driver_id: str,
    payload: DriverUpdate,
    service: DriverService = Depends(get_driver_service),
):
    driver = service.update(driver_id, payload)
    return success_response(DriverResponse.model_validate(driver), 1, "Updated Successfully")


@router.delete("/{driver_id}", response_model=SuccessResponse[None])
def delete_driver(
    driver_id: str,
    service: DriverService = Depends(get_driver_service),
):
    service.delete(driver_id)
    return success_response(None, 1, "Deleted Successfully")
