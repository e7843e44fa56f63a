"""
Application exceptions.

Each exception type fixes the HTTP status and machine readable code it maps
to; instances carry the user facing message (falling back to the type's
default) plus a `details` dict that is logged but never sent to clients.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional


class ErrorCode(str, Enum):
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    ACADEMIC_YEAR_REQUIRED = "ACADEMIC_YEAR_REQUIRED"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    RESOURCE_IN_USE = "RESOURCE_IN_USE"


class BaseAppException(Exception):
    status_code: ClassVar[int] = 500
    error_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR
    default_message: ClassVar[str] = "Something Went Wrong"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


# 4xx ---------------------------------------------------------------------------

class ValidationError(BaseAppException):
    """Missing or malformed input (422)."""

    status_code = 422
    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Please Provide All Required Fields"

    def __init__(
        self,
        message: Optional[str] = None,
        field_errors: Optional[Dict[str, List[str]]] = None,
    ):
        super().__init__(message, {"field_errors": field_errors} if field_errors else None)


class InvalidDateRangeError(ValidationError):
    error_code = ErrorCode.INVALID_DATE_RANGE
    default_message = "Start Date Should Be Less Than End Date"


class BadRequestError(BaseAppException):
    """Well formed request that breaks a business rule (400)."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST
    default_message = "Bad Request"


class InvalidFormatError(BadRequestError):
    error_code = ErrorCode.INVALID_FORMAT

    def __init__(self, message: str, field: str):
        super().__init__(message, {"field": field})


class ConflictError(BadRequestError):
    # Clients expect 400 for duplicates, not 409
    error_code = ErrorCode.DUPLICATE_ENTRY
    default_message = "Record Already Exists"


class ResourceInUseError(BadRequestError):
    error_code = ErrorCode.RESOURCE_IN_USE


class ActiveAcademicYearRequiredError(BadRequestError):
    error_code = ErrorCode.ACADEMIC_YEAR_REQUIRED
    default_message = "Please Select An Academic Year"

    def __init__(self, school_id: Optional[str] = None):
        super().__init__(details={"school_id": school_id})


class InsufficientCapacityError(BadRequestError):
    error_code = ErrorCode.INSUFFICIENT_CAPACITY
    default_message = "No available seats on the selected route"

    def __init__(self, route_id: Optional[str] = None):
        super().__init__(details={"route_id": route_id})


class ResourceNotFoundError(BaseAppException):
    status_code = 404
    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"{resource_type} Not Found",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "InvalidDateRangeError",
    "BadRequestError",
    "InvalidFormatError",
    "ConflictError",
    "ResourceInUseError",
    "ActiveAcademicYearRequiredError",
    "InsufficientCapacityError",
    "ResourceNotFoundError",
]
