from school_admin.schemas.common.base import (
    BaseCreateSchema,
    BaseDBSchema,
    BaseSchema,
    BaseUpdateSchema,
    TimestampMixin,
)
from school_admin.schemas.common.response import ErrorResponse, SuccessResponse, success_response

__all__ = [
    "BaseSchema",
    "BaseDBSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "TimestampMixin",
    "SuccessResponse",
    "ErrorResponse",
    "success_response",
]
