"""Domain-specific exceptions for the employee API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses, avoiding string matching in routers.
"""

from typing import Any


class EmployeeAPIError(Exception):
    """Base exception for all employee API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(EmployeeAPIError):
    """Base class for resource not found errors."""

    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: int | None = None) -> None:
        message = "Employee not found"
        details = {"employee_id": employee_id} if employee_id is not None else {}
        super().__init__(message, details)
