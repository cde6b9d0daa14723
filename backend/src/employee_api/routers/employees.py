"""Employees router - CRUD over the employee directory."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import Response

from employee_api.config import get_settings
from employee_api.constants.validation import (
    ALLOWED_EMPLOYEE_SORT_COLUMNS,
    DEFAULT_EMPLOYEE_SORT_COLUMN,
    DEFAULT_SORT_DIRECTION,
    MAX_EMPLOYEE_ID,
)
from employee_api.dependencies import get_employee_service
from employee_api.exceptions import EmployeeNotFoundError
from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.validation import (
    sanitize_search,
    validate_sort_by,
    validate_sort_direction,
)

router = APIRouter()

EmployeeId = Annotated[int, Path(ge=1, le=MAX_EMPLOYEE_ID, description="Employee ID")]


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Employee not found",
    )


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
    search: str | None = Query(default=None, max_length=200),
    sort_by: str = Query(default=DEFAULT_EMPLOYEE_SORT_COLUMN, max_length=50),
    sort_dir: str = Query(default=DEFAULT_SORT_DIRECTION, max_length=10),
    page: int = Query(default=1, ge=1, le=10000),
    page_size: int | None = Query(default=None, ge=1, le=200),
) -> EmployeeListResponse:
    """List employees with optional search, sorting and pagination."""
    settings = get_settings()
    if page_size is None:
        page_size = settings.default_page_size
    page_size = min(page_size, settings.max_page_size)

    return await employee_service.list_employees(
        search=sanitize_search(search),
        sort_by=validate_sort_by(sort_by, ALLOWED_EMPLOYEE_SORT_COLUMNS, DEFAULT_EMPLOYEE_SORT_COLUMN),
        sort_dir=validate_sort_direction(sort_dir, DEFAULT_SORT_DIRECTION),
        page=page,
        page_size=page_size,
    )


@router.get("/export")
async def export_employees_csv(
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> Response:
    """Export all employees as a downloadable CSV file."""
    csv_content = await employee_service.export_csv()
    filename = f"employees_{date.today().isoformat()}.csv"

    return Response(
        content=csv_content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": "no-cache",
        },
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: EmployeeId,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Get a single employee by ID."""
    try:
        return await employee_service.get_employee(employee_id)
    except EmployeeNotFoundError:
        raise _not_found()


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Create an employee. The id is assigned by the server."""
    return await employee_service.create_employee(body)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: EmployeeId,
    body: EmployeeUpdate,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Update an employee. Fields missing from the body are left unchanged."""
    try:
        return await employee_service.update_employee(employee_id, body)
    except EmployeeNotFoundError:
        raise _not_found()


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: EmployeeId,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> None:
    """Delete an employee."""
    try:
        await employee_service.delete_employee(employee_id)
    except EmployeeNotFoundError:
        raise _not_found()
