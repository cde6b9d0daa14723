"""Employee domain model."""

from typing import Any

from pydantic import BaseModel

# Canonical field order, also the order of positional construction
EMPLOYEE_FIELDS = ("id", "firstname", "lastname", "email", "address", "phone")


class Employee(BaseModel):
    """Employee domain model.

    A plain record: attribute access reads and writes fields without
    validation, equality compares all six fields, and ``str()``/``repr()``
    list every field with its current value.

    ``id`` stays ``None`` until the repository assigns one on first save.
    """

    id: int | None = None
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    address: str | None = None
    phone: str | None = None

    class Config:
        """Pydantic config."""

        from_attributes = True

    def __init__(self, *args: Any, **data: Any) -> None:
        """Create an employee from positional values, keyword values, or both.

        Positional values are assigned in ``EMPLOYEE_FIELDS`` order. Values
        are stored exactly as given, the same as attribute assignment.

        Raises:
            TypeError: If too many positional values are given, a field
                is given both positionally and by keyword, or a keyword
                is not an employee field
        """
        if len(args) > len(EMPLOYEE_FIELDS):
            raise TypeError(
                f"Employee takes at most {len(EMPLOYEE_FIELDS)} positional arguments "
                f"({len(args)} given)"
            )
        unknown = sorted(set(data) - set(EMPLOYEE_FIELDS))
        if unknown:
            raise TypeError(f"Employee got an unexpected field '{unknown[0]}'")
        for name, value in zip(EMPLOYEE_FIELDS, args):
            if name in data:
                raise TypeError(f"Employee got multiple values for field '{name}'")
            data[name] = value

        # No coercion, construction behaves like the setters
        constructed = self.model_construct(**data)
        for slot in (
            "__dict__",
            "__pydantic_fields_set__",
            "__pydantic_extra__",
            "__pydantic_private__",
        ):
            object.__setattr__(self, slot, getattr(constructed, slot))
