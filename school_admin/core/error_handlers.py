"""
Central exception handlers.

Every failure leaves the API as `{message, statusCode}`: application
exceptions keep their own message and status, request validation failures
become 422, integrity violations become 400 and anything unexpected is
logged with its traceback and masked as a 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from school_admin.core.exceptions import BaseAppException
from school_admin.core.logging import get_logger
from school_admin.core.middleware import get_request_id
from school_admin.schemas.common.response import ErrorResponse

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something Went Wrong"
MISSING_FIELDS_MESSAGE = "Please Provide All Required Fields"


def _error_json(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse.create(message, status_code).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


async def handle_application_exception(request: Request, exception: BaseAppException) -> JSONResponse:
    logger.warning(
        f"Application exception: {exception.error_code.value} - {exception.message}",
        extra={
            "request_id": get_request_id(request),
            "path": request.url.path,
            "method": request.method,
            "status_code": exception.status_code,
            "details": exception.details,
        },
    )
    return _error_json(exception.message, exception.status_code)


async def handle_validation_error(request: Request, exception: RequestValidationError) -> JSONResponse:
    field_errors = {
        ".".join(str(part) for part in error["loc"]): error["msg"]
        for error in exception.errors()
    }
    logger.warning(
        f"Validation error: {len(field_errors)} field(s) failed validation",
        extra={
            "request_id": get_request_id(request),
            "path": request.url.path,
            "method": request.method,
            "validation_errors": field_errors,
        },
    )
    return _error_json(MISSING_FIELDS_MESSAGE, 422)


async def handle_integrity_error(request: Request, exception: IntegrityError) -> JSONResponse:
    logger.warning(
        "Integrity violation",
        extra={
            "request_id": get_request_id(request),
            "path": request.url.path,
            "error": str(exception.orig),
        },
    )
    return _error_json("Record Already Exists", status.HTTP_400_BAD_REQUEST)


async def handle_unexpected_exception(request: Request, exception: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception: {exception}",
        exc_info=exception,
        extra={
            "request_id": get_request_id(request),
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exception).__name__,
            "database_error": isinstance(exception, SQLAlchemyError),
        },
    )
    return _error_json(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, handle_application_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_unexpected_exception)
