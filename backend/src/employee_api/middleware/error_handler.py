"""Global error handlers to prevent information disclosure."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.config import get_settings
from employee_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    422: "Invalid input data",
    500: "Internal server error",
    503: "Service temporarily unavailable",
}

# Error messages that are safe to pass through
# These don't reveal internal implementation details
ALLOWED_ERROR_PATTERNS = [
    "Resource not found",
    "Employee not found",
    "Not Found",
    "Method Not Allowed",
]

MAX_REPORTED_VALIDATION_ERRORS = 3


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Exception handlers run outside the CORS middleware, so error
    responses need the headers added explicitly.

    Args:
        request: The incoming request

    Returns:
        Dict of CORS headers to add to the response
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    if origin in get_settings().cors_origins_list:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }

    return {}


def is_safe_error_message(message: str) -> bool:
    """Check if an error message is safe to expose to users.

    Args:
        message: Error message to check

    Returns:
        True if message is safe to expose
    """
    message_lower = message.lower()
    return any(pattern.lower() in message_lower for pattern in ALLOWED_ERROR_PATTERNS)


def sanitize_error_detail(detail: Any, status_code: int) -> str:
    """Sanitize error detail to prevent information disclosure.

    Args:
        detail: Original error detail
        status_code: HTTP status code

    Returns:
        Safe error message
    """
    if isinstance(detail, str):
        if is_safe_error_message(detail):
            return detail
    elif isinstance(detail, list):
        # Validation errors - extract safe field information
        safe_errors = []
        for error in detail:
            if isinstance(error, dict):
                loc = error.get("loc", [])
                msg = error.get("msg", "Invalid value")
                # Only include field name, not the rejected input
                field = loc[-1] if loc else "field"
                if isinstance(field, str) and not field.startswith("_"):
                    safe_errors.append(f"{field}: {msg}")
        if safe_errors:
            return "; ".join(safe_errors[:MAX_REPORTED_VALIDATION_ERRORS])

    return SAFE_ERROR_MESSAGES.get(status_code, "Request failed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with sanitized error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    if settings.debug:
        detail = exc.detail
    else:
        detail = sanitize_error_detail(exc.detail, exc.status_code)

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail},
        headers={**cors_headers, **(exc.headers or {})},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle validation exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with sanitized error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    # Field locations only, request bodies carry personal data
    locations = [".".join(str(part) for part in error.get("loc", [])) for error in exc.errors()]
    logger.warning(f"Validation error for {request.url.path}: {locations}")

    if settings.debug:
        detail: Any = jsonable_errors(exc.errors())
    else:
        detail = sanitize_error_detail(exc.errors(), status.HTTP_422_UNPROCESSABLE_ENTITY)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": detail},
        headers=cors_headers,
    )


def jsonable_errors(errors: Any) -> list[dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe keys."""
    return [
        {"loc": list(error.get("loc", [])), "msg": error.get("msg"), "type": error.get("type")}
        for error in errors
    ]


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy exceptions without leaking database details.

    Args:
        request: FastAPI request
        exc: SQLAlchemy exception

    Returns:
        JSONResponse with safe error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    log_error(logger, f"Database error for {request.url.path}", exc)

    # Check for integrity errors (duplicates, foreign key violations)
    if isinstance(exc, IntegrityError):
        message = str(exc).lower()
        if "unique" in message or "duplicate" in message:
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"detail": "Resource already exists"},
                headers=cors_headers,
            )
        if "foreign key" in message:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": "Referenced resource not found"},
                headers=cors_headers,
            )

    if settings.debug:
        content = {"detail": "Database error", "type": type(exc).__name__}
    else:
        content = {"detail": "Database error occurred"}

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=cors_headers,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    logger.error(f"Unhandled exception for {request.url.path}: {type(exc).__name__}", exc_info=exc)

    if settings.debug:
        content = {"detail": str(exc), "type": type(exc).__name__}
    else:
        content = {"detail": SAFE_ERROR_MESSAGES[500]}

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=cors_headers,
    )
