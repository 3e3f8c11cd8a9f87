"""
Application exceptions and the global exception handlers for the FastAPI application.
Exceptions are serialized into structured error bodies and logged.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Any

from payterms.core.observability import record_exception


logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """
    A payment term violates the catalog invariants.
    Recoverable: the caller re-prompts and the catalog is left unmodified.
    """
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY, details)


class ConflictError(AppException):
    """
    A manual discount and a payment-term discount are both active.
    Advisory: the message names the value that has to be reset.
    """
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class NotFoundError(AppException):
    """Requested record does not exist."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "details": exc.details,
        },
    )

    if exc.status_code >= 500:
        record_exception(exc, request)

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": exc.message,
                "details": exc.details,
                "path": request.url.path,
            }
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        f"HTTP exception: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": exc.detail,
                "status_code": exc.status_code,
                "path": request.url.path,
            }
        },
    )


def _serialize_validation_errors(errors: list) -> list:
    """Convert validation errors to JSON-serializable format."""
    serialized = []
    for error in errors:
        serialized_error = {}
        for key, value in error.items():
            if key == "ctx" and isinstance(value, dict):
                # ctx may hold the raised ValueError itself
                serialized_error[key] = {
                    ctx_key: str(ctx_value) if isinstance(ctx_value, Exception) else ctx_value
                    for ctx_key, ctx_value in value.items()
                }
            elif isinstance(value, Exception):
                serialized_error[key] = str(value)
            else:
                serialized_error[key] = value
        serialized.append(serialized_error)
    # Constraint values such as Decimal bounds are not JSON-native
    return jsonable_encoder(serialized)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    serialized_errors = _serialize_validation_errors(exc.errors())

    logger.warning(
        f"Validation error: {serialized_errors}",
        extra={
            "path": request.url.path,
            "errors": serialized_errors,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "message": "Validation error",
                "details": serialized_errors,
                "path": request.url.path,
            }
        },
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )

    record_exception(exc, request)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "message": "Internal server error",
                "path": request.url.path,
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
