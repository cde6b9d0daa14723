"""Employee repository."""

from sqlalchemy import func, select

from employee_api.constants.validation import (
    ALLOWED_EMPLOYEE_SORT_COLUMNS,
    DEFAULT_EMPLOYEE_SORT_COLUMN,
    MAX_EMPLOYEE_ID,
)
from employee_api.exceptions import EmployeeNotFoundError
from employee_api.models.domain.employee import Employee
from employee_api.models.orm.employee import EmployeeORM
from employee_api.repositories.base import BaseRepository
from employee_api.utils.validation import escape_like_wildcards


def _is_storable_id(value: object) -> bool:
    """Check that a value fits the BIGINT primary key column."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_EMPLOYEE_ID


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def save(self, employee: Employee) -> Employee:
        """Insert or update an employee.

        An employee without an id is inserted and the generated id is
        written back onto the passed entity. An employee with an id
        overwrites all five data fields of that row.

        Args:
            employee: Domain employee

        Returns:
            Domain copy of the stored row

        Raises:
            EmployeeNotFoundError: If the employee has an id with no row
        """
        if employee.id is not None and not _is_storable_id(employee.id):
            # No row can carry this id
            raise EmployeeNotFoundError(employee.id)

        values = employee.model_dump(exclude={"id"})

        if employee.id is None:
            employee_orm = await self.create(**values)
            employee.id = employee_orm.id
        else:
            employee_orm = await self.update(employee.id, **values)
            if employee_orm is None:
                raise EmployeeNotFoundError(employee.id)

        return Employee.model_validate(employee_orm)

    async def find_by_id(self, employee_id: int) -> Employee | None:
        """Get an employee as a domain object.

        Args:
            employee_id: Employee ID

        Returns:
            Employee or None if not found
        """
        if not _is_storable_id(employee_id):
            return None
        employee_orm = await self.get_by_id(employee_id)
        if employee_orm is None:
            return None
        return Employee.model_validate(employee_orm)

    async def get_all_with_filters(
        self,
        search: str | None = None,
        sort_by: str = DEFAULT_EMPLOYEE_SORT_COLUMN,
        sort_dir: str = "asc",
        offset: int = 0,
        limit: int = 100,
    ) -> tuple[list[EmployeeORM], int]:
        """Get employees with optional filters.

        Args:
            search: Search in first name, last name or email
            sort_by: Column to sort by
            sort_dir: Sort direction (asc or desc)
            offset: Pagination offset
            limit: Pagination limit

        Returns:
            Tuple of (employees, total_count)
        """
        query = select(EmployeeORM)
        count_query = select(func.count()).select_from(EmployeeORM)

        if search:
            escaped_search = f"%{escape_like_wildcards(search)}%"
            search_filter = (
                EmployeeORM.firstname.ilike(escaped_search, escape="\\")
                | EmployeeORM.lastname.ilike(escaped_search, escape="\\")
                | EmployeeORM.email.ilike(escaped_search, escape="\\")
            )
            query = query.where(search_filter)
            count_query = count_query.where(search_filter)

        # Validated sorting - only allow whitelisted columns
        if sort_by not in ALLOWED_EMPLOYEE_SORT_COLUMNS:
            sort_by = DEFAULT_EMPLOYEE_SORT_COLUMN
        if sort_dir not in ("asc", "desc"):
            sort_dir = "asc"

        sort_column = getattr(EmployeeORM, sort_by)
        if sort_dir == "desc":
            query = query.order_by(sort_column.desc().nulls_last(), EmployeeORM.id)
        else:
            query = query.order_by(sort_column.asc().nulls_last(), EmployeeORM.id)

        total = (await self.session.execute(count_query)).scalar_one()

        result = await self.session.execute(query.offset(offset).limit(limit))
        return list(result.scalars().all()), total
