"""
Fee type endpoints (`/feetype`).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from school_admin.api.deps import get_fee_type_service
from school_admin.core.pagination import normalize_pagination
from school_admin.models.enums import AccountType
from school_admin.schemas.common.response import SuccessResponse, success_response
from school_admin.schemas.fee_type import FeeTypeCreate, FeeTypeResponse, FeeTypeUpdate
from school_admin.services import FeeTypeService

router = APIRouter(prefix="/feetype", tags=["Fee Types"])


@router.post(
    "",
    response_model=SuccessResponse[FeeTypeResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_fee_type(
    payload: FeeTypeCreate,
    service: FeeTypeService = Depends(get_fee_type_service),
):
    fee_type = service.create(payload)
    return success_response(FeeTypeResponse.model_validate(fee_type), 1, "Fee Type Created Successfully")


@router.get("", response_model=SuccessResponse[List[FeeTypeResponse]])
def list_fee_types(
    school_id: Optional[str] = Query(None, alias="schoolId"),
    account_type: Optional[AccountType] = Query(None, alias="accountType"),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    is_misc: Optional[bool] = Query(None, alias="isMisc"),
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    service: FeeTypeService = Depends(get_fee_type_service),
):
    # Paginated only when the caller asks for a page explicitly
    pagination = normalize_pagination(page, limit) if page is not None and limit is not None else None
    fee_types, total = service.list(
        school_id=school_id,
        account_type=account_type,
        category_id=category_id,
        is_misc=is_misc,
        pagination=pagination,
    )
    data = [FeeTypeResponse.model_validate(item) for item in fee_types]
    return success_response(data, total, "Fetched Successfully")


@router.get("/{fee_type_id}", response_model=SuccessResponse[FeeTypeResponse])
def read_fee_type(
    fee_type_id: str,
    service: FeeTypeService = Depends(get_fee_type_service),
):
    fee_type = service.read(fee_type_id)
    return success_response(FeeTypeResponse.model_validate(fee_type), 1, "Fetched Successfully")


@router.put("/{fee_type_id}", response_model=SuccessResponse[FeeTypeResponse])
def update_fee_type(
    fee_type_id: str,
    payload: FeeTypeUpdate,
    service: FeeTypeService = Depends(get_fee_type_service),
):
    fee_type = service.update(fee_type_id, payload)
    return success_response(FeeTypeResponse.model_validate(fee_type), 1, "Updated Successfully")


@router.delete("/{fee_type_id}", response_model=SuccessResponse[None])
def delete_fee_type(
    fee_type_id: str,
    service: FeeTypeService = Depends(get_fee_type_service),
):
    service.delete(fee_type_id)
    return success_response(None, 1, "Deleted Successfully")
