"""Data Transfer Objects package."""

from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)

__all__ = [
    "EmployeeCreate",
    "EmployeeListResponse",
    "EmployeeResponse",
    "EmployeeUpdate",
]
