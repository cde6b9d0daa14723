"""Employee ORM model."""

from sqlalchemy import BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.models.orm.base import Base, TimestampMixin

# SQLite only autoincrements INTEGER PRIMARY KEY columns
EmployeeId = BigInteger().with_variant(Integer(), "sqlite")


class EmployeeORM(Base, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(EmployeeId, primary_key=True, autoincrement=True)
    firstname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    lastname: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_employees_email", "email"),
        Index("idx_employees_lastname", "lastname"),
    )
