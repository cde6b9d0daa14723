"""Centralized validation constants for the employee API.

Single source of truth for the whitelists and defaults shared by the
router, the service and the repository.
"""

from typing import Final

ALLOWED_EMPLOYEE_SORT_COLUMNS: Final[frozenset[str]] = frozenset(
    {
        "id",
        "firstname",
        "lastname",
        "email",
    }
)

DEFAULT_EMPLOYEE_SORT_COLUMN: Final[str] = "lastname"
DEFAULT_SORT_DIRECTION: Final[str] = "asc"

# Upper bound of a BIGINT primary key
MAX_EMPLOYEE_ID: Final[int] = 2**63 - 1
