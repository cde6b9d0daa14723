"""Domain models package."""

from employee_api.models.domain.employee import EMPLOYEE_FIELDS, Employee

__all__ = [
    "EMPLOYEE_FIELDS",
    "Employee",
]
