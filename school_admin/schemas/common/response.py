"""
Standard API response wrappers for success and error payloads.
"""

from typing import Any, Generic, TypeVar, Union

from pydantic import Field

from school_admin.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "success_response",
]


class SuccessResponse(BaseSchema, Generic[T]):
    """Standard success response: `{success, data, resultCount, message}`."""

    success: bool = Field(default=True, description="Success flag")
    data: Union[T, None] = Field(default=None, description="Response data")
    result_count: int = Field(default=0, ge=0, description="Number of matching records")
    message: str = Field(default="Success", description="Response message")

    @classmethod
    def create(
        cls,
        data: Union[T, None] = None,
        result_count: int = 0,
        message: str = "Success",
    ):
        """Create success response."""
        return cls(success=True, data=data, result_count=result_count, message=message)


class ErrorResponse(BaseSchema):
    """Standard error response: `{message, statusCode}`."""

    message: str = Field(..., description="Error message")
    status_code: int = Field(..., description="HTTP status code")

    @classmethod
    def create(cls, message: str, status_code: int):
        """Create error response."""
        return cls(message=message, status_code=status_code)


def success_response(data: Any = None, count: int = 0, message: str = "Success") -> SuccessResponse:
    """Wrap a payload in the success envelope."""
    return SuccessResponse.create(data, count, message)
