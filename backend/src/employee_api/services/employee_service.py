"""Employee service for listing, creating, updating and deleting employees."""

import csv
import io
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.constants.validation import DEFAULT_EMPLOYEE_SORT_COLUMN
from employee_api.exceptions import EmployeeNotFoundError
from employee_api.models.domain.employee import EMPLOYEE_FIELDS, Employee
from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)

# Upper bound for a single CSV export
MAX_EXPORT_ROWS = 50000


class EmployeeService:
    """Service for managing employees."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)

    @staticmethod
    def _build_response(employee: Employee) -> EmployeeResponse:
        """Build an EmployeeResponse from a stored domain employee."""
        return EmployeeResponse(**employee.model_dump())

    async def list_employees(
        self,
        search: str | None = None,
        sort_by: str = DEFAULT_EMPLOYEE_SORT_COLUMN,
        sort_dir: str = "asc",
        page: int = 1,
        page_size: int = 50,
    ) -> EmployeeListResponse:
        """List employees with optional search, sorting and pagination.

        Args:
            search: Search in first name, last name or email
            sort_by: Column to sort by
            sort_dir: Sort direction (asc or desc)
            page: Page number, starting at 1
            page_size: Items per page

        Returns:
            EmployeeListResponse
        """
        offset = (page - 1) * page_size
        rows, total = await self.employee_repo.get_all_with_filters(
            search=search,
            sort_by=sort_by,
            sort_dir=sort_dir,
            offset=offset,
            limit=page_size,
        )
        items = [EmployeeResponse.model_validate(row) for row in rows]
        return EmployeeListResponse(items=items, total=total, page=page, page_size=page_size)

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        """Get a single employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return self._build_response(employee)

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResponse:
        """Create an employee.

        Args:
            data: Employee creation data

        Returns:
            Created EmployeeResponse carrying the assigned id
        """
        employee = Employee(**data.model_dump())
        stored = await self.employee_repo.save(employee)

        logger.info(f"Created employee {stored.id}")

        # Note: Commit handled by get_db() dependency after endpoint completes
        return self._build_response(stored)

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> EmployeeResponse:
        """Apply a partial update to an employee.

        Only fields present in the request are considered. Fields whose
        value does not change are skipped, and an update without changes
        does not write to the database.

        Args:
            employee_id: Employee ID
            data: Employee update data

        Returns:
            Updated EmployeeResponse

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        changed_fields = []
        for field, value in data.model_dump(exclude_unset=True).items():
            if getattr(employee, field) != value:
                setattr(employee, field, value)
                changed_fields.append(field)

        if not changed_fields:
            logger.debug(f"No changes for employee {employee_id}")
            return self._build_response(employee)

        stored = await self.employee_repo.save(employee)
        # Field names only, values are personal data
        logger.info(f"Updated employee {employee_id}: {', '.join(changed_fields)}")

        return self._build_response(stored)

    async def delete_employee(self, employee_id: int) -> None:
        """Delete an employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        deleted = await self.employee_repo.delete(employee_id)
        if not deleted:
            raise EmployeeNotFoundError(employee_id)

        logger.info(f"Deleted employee {employee_id}")

    async def export_csv(self) -> str:
        """Export all employees to CSV, ordered by id.

        At most ``MAX_EXPORT_ROWS`` rows are written. A truncated export
        is logged as a warning.

        Returns:
            CSV string with a header row of the employee field names
        """
        rows = await self.employee_repo.get_all(limit=MAX_EXPORT_ROWS)
        if len(rows) >= MAX_EXPORT_ROWS:
            total = await self.employee_repo.count()
            if total > len(rows):
                logger.warning(f"Employee export truncated to {len(rows)} of {total} rows")

        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(EMPLOYEE_FIELDS)
        for row in rows:
            writer.writerow(
                [str(row.id)]
                + [getattr(row, field) or "" for field in EMPLOYEE_FIELDS[1:]]
            )

        return output.getvalue()
