"""
Exception handlers producing the uniform error body.

Every failure leaves the API as ``{timestamp, status, message, path}``.
Register them once with ``register_exception_handlers(app)``.
"""
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import DEBUG
from app.exceptions import TaskTrackerError
from app.schemas.error import ErrorResponse
from app.utils.logger import get_logger

logger = get_logger(__name__)

# AccessDenied reports as 404, same as a missing task
ERROR_CODE_STATUS = {
    "TASK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCESS_DENIED": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_USER": status.HTTP_409_CONFLICT,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(request: Request, status_code: int, message: str, headers=None) -> JSONResponse:
    """Build the uniform error body for ``request``."""
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def _domain_exception_handler(request: Request, exc: TaskTrackerError) -> JSONResponse:
    status_code = ERROR_CODE_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(request, status_code, exc.message, headers)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"query" segment
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "Invalid value")
        # pydantic prefixes messages raised from validators
        message = message.removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Request validation failed"


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(request, status.HTTP_400_BAD_REQUEST, _format_validation_errors(exc))


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure; only expose its message when DEBUG is on."""
    logger.exception("Unhandled exception", exc_info=exc, path=request.url.path, error=type(exc).__name__)
    message = str(exc) if DEBUG else INTERNAL_ERROR_MESSAGE
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(TaskTrackerError, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
