"""Global exception handlers for consistent error responses.

Every error leaves the API in the same envelope::

    {"error": {"code": ..., "message": ..., "request_id": ..., "details": ...}}

- ValidationAppError and request body validation failures → 400
- ConfigurationAppError → 500
- Unexpected Exception → generic 500 (no internals leaked)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sa_ats.core.errors import AppError, ConfigurationAppError
from sa_ats.core.logging import get_request_id

logger = logging.getLogger(__name__)


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error_content = {
        "code": code,
        "message": message,
        "request_id": get_request_id(),
    }
    if details:
        error_content["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error_content})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map domain errors to HTTP responses.

    Client faults (ValidationAppError and any other AppError) become 400;
    ConfigurationAppError is a server fault and becomes 500.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with the error envelope.
    """
    status_code = 500 if isinstance(exc, ConfigurationAppError) else 400

    logger.warning(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "has_details": bool(exc.details),
            "request_path": request.url.path,
        },
    )

    return _error_response(status_code, exc.code, exc.message, exc.details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies (missing or non-string text) as 400."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]

    logger.warning(
        "request_validation_failed",
        extra={
            "error_count": len(errors),
            "request_path": request.url.path,
        },
    )

    return _error_response(
        400,
        "invalid_request",
        "Request body is invalid.",
        {"errors": jsonable_encoder(errors)},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors.

    Logs the failure for debugging while returning a generic message so no
    stack traces or exception text reach the client.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )

    return _error_response(
        500,
        "internal_server_error",
        "An unexpected error occurred. Please try again later.",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(RequestValidationError)(request_validation_error_handler)
    app.exception_handler(Exception)(general_exception_handler)
