"""Employee DTOs."""

from pydantic import BaseModel, Field

MAX_FIELD_LENGTH = 255


class EmployeeResponse(BaseModel):
    """Employee response DTO."""

    id: int
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    address: str | None = None
    phone: str | None = None

    class Config:
        """Pydantic config."""

        from_attributes = True


class EmployeeListResponse(BaseModel):
    """Employee list response DTO."""

    items: list[EmployeeResponse]
    total: int
    page: int
    page_size: int


class EmployeeCreate(BaseModel):
    """DTO for creating an employee. The id is always assigned by the server."""

    firstname: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="First name")
    lastname: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Last name")
    email: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Email address")
    address: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Postal address")
    phone: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Phone number")


class EmployeeUpdate(BaseModel):
    """DTO for updating an employee.

    Only fields present in the request body are applied, so sending
    ``null`` clears a field while omitting it leaves it unchanged.
    """

    firstname: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="First name")
    lastname: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Last name")
    email: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Email address")
    address: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Postal address")
    phone: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH, description="Phone number")
