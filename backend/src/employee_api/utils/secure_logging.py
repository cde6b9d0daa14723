"""Secure logging utilities to keep personal data out of production logs."""

import logging
import re

from employee_api.config import get_settings

MAX_LOGGED_MESSAGE_LENGTH = 200


def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Sanitize exception message for logging in production.

    Removes potentially sensitive information like:
    - File system paths
    - Database connection strings
    - Email addresses
    - API keys/tokens

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    # Connection strings first, they contain slashes and would look like paths
    url_pattern = r"(postgresql|postgres|mysql|sqlite|http|https)(\+\w+)?://[^\s]+"
    error_msg = re.sub(url_pattern, "[URL]", error_msg)

    # Remove file paths (Unix and Windows)
    error_msg = re.sub(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?", "[PATH]", error_msg)

    # Employee emails end up in constraint violation messages
    error_msg = re.sub(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+", "[EMAIL]", error_msg)

    # Remove potential API keys/tokens (long alphanumeric strings)
    error_msg = re.sub(r"[a-zA-Z0-9_\-]{32,}", "[TOKEN]", error_msg)

    if len(error_msg) > MAX_LOGGED_MESSAGE_LENGTH:
        error_msg = error_msg[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."

    return error_msg


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
) -> None:
    """Log an error with appropriate detail level based on environment.

    In debug mode, logs full exception details.
    In production, logs sanitized message without sensitive details.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no personal data)
        error: Optional exception to include
    """
    if is_debug_mode():
        if error:
            logger.error(f"{message}: {error}", exc_info=error)
        else:
            logger.error(message)
    else:
        if error:
            sanitized = sanitize_exception_message(error)
            logger.error(f"{message}: {sanitized}")
        else:
            logger.error(message)
