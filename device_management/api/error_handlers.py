"""
Application-wide exception handlers.

Every error leaves the API as an ErrorResponse body: timestamp, status,
reason, message and (when there is something to add) details.
"""

# Standard library imports
import logging
from http import HTTPStatus
from typing import Any, Dict, Optional, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.error_dto import ErrorResponse
from ..domain.exceptions import (
    DeviceDeletionConflictError,
    DeviceError,
    DeviceNotFoundError,
    DeviceUpdateConflictError,
    DeviceUpdateValidationError,
    InvalidDeviceStateError,
)
from ..domain.models.device import DeviceState
from ..utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[DeviceError], int] = {
    DeviceNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidDeviceStateError: status.HTTP_400_BAD_REQUEST,
    DeviceUpdateValidationError: status.HTTP_400_BAD_REQUEST,
    DeviceUpdateConflictError: status.HTTP_409_CONFLICT,
    DeviceDeletionConflictError: status.HTTP_409_CONFLICT,
}


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the JSON error body for a status code"""
    body = ErrorResponse(
        timestamp=utc_now(),
        status=status_code,
        error=error or HTTPStatus(status_code).phrase,
        message=message,
        details=details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def device_error_handler(request: Request, exc: DeviceError) -> JSONResponse:
    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return error_response(status_code, exc.message, details=exc.details)


def _field_name(location: tuple) -> str:
    # ("body", "name") -> "name"; the bare ("body",) means the body itself
    parts = [str(part) for part in location if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Turn pydantic request validation failures into 400 responses.

    An unreadable body or an unknown enum value is reported as a single
    message. Anything else is reported field by field in details.
    """
    errors = exc.errors()

    for error in errors:
        if error.get("type") == "json_invalid":
            return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")
        if error.get("type") == "enum":
            valid_values = ", ".join(state.value for state in DeviceState)
            message = (
                f"Invalid value '{error.get('input')}' for field '{_field_name(error['loc'])}'. "
                f"Valid values are: [{valid_values}]"
            )
            return error_response(status.HTTP_400_BAD_REQUEST, message)

    details: Dict[str, str] = {}
    for error in errors:
        details[_field_name(error["loc"])] = error["msg"].removeprefix("Value error, ")

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Input validation failed for fields.",
        error="Validation Failed",
        details=details,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please check server logs.",
    )


def register_error_handlers(application: FastAPI) -> None:
    """Attach the error handlers to the application"""
    application.add_exception_handler(DeviceError, device_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
