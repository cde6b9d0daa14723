"""Employee service tests."""

import csv
import io
import logging

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.exceptions import EmployeeNotFoundError
from employee_api.models.domain.employee import EMPLOYEE_FIELDS
from employee_api.models.dto.employee import EmployeeCreate, EmployeeUpdate
from employee_api.services import employee_service
from employee_api.services.employee_service import EmployeeService

ADA = EmployeeCreate(
    firstname="Ada",
    lastname="Lovelace",
    email="ada@example.com",
    address="1 Infinite Loop",
    phone="555-0100",
)


class TestCreateAndGet:
    """Creating and reading employees."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)

        created = await service.create_employee(ADA)

        assert created.id >= 1
        assert created.model_dump(exclude={"id"}) == ADA.model_dump()

    @pytest.mark.asyncio
    async def test_get_returns_created(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(ADA)

        assert await service.get_employee(created.id) == created

    @pytest.mark.asyncio
    async def test_get_missing_raises(self, db_session: AsyncSession) -> None:
        with pytest.raises(EmployeeNotFoundError):
            await EmployeeService(db_session).get_employee(404)

    @pytest.mark.asyncio
    async def test_create_logs_id(self, db_session: AsyncSession, caplog: pytest.LogCaptureFixture) -> None:
        service = EmployeeService(db_session)

        with caplog.at_level(logging.INFO, logger="employee_api.services.employee_service"):
            created = await service.create_employee(ADA)

        assert f"Created employee {created.id}" in caplog.text


class TestUpdate:
    """Partial updates."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(ADA)

        updated = await service.update_employee(created.id, EmployeeUpdate(phone="555-0199"))

        assert updated.phone == "555-0199"
        assert updated.model_dump(exclude={"phone"}) == created.model_dump(exclude={"phone"})

    @pytest.mark.asyncio
    async def test_explicit_null_clears_field(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(ADA)

        updated = await service.update_employee(created.id, EmployeeUpdate(address=None))

        assert updated.address is None
        assert updated.firstname == "Ada"

    @pytest.mark.asyncio
    async def test_empty_update_is_a_no_op(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(ADA)

        updated = await service.update_employee(created.id, EmployeeUpdate())

        assert updated == created

    @pytest.mark.asyncio
    async def test_log_names_fields_without_values(
        self, db_session: AsyncSession, caplog: pytest.LogCaptureFixture
    ) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(ADA)

        with caplog.at_level(logging.INFO, logger="employee_api.services.employee_service"):
            await service.update_employee(
                created.id, EmployeeUpdate(email="augusta@example.com", firstname="Ada")
            )

        assert f"Updated employee {created.id}: email" in caplog.text
        assert "augusta@example.com" not in caplog.text

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, db_session: AsyncSession) -> None:
        with pytest.raises(EmployeeNotFoundError):
            await EmployeeService(db_session).update_employee(404, EmployeeUpdate(firstname="X"))


class TestDeleteAndList:
    """Deletion, listing and export."""

    @pytest.mark.asyncio
    async def test_delete(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        created = await service.create_employee(ADA)

        await service.delete_employee(created.id)

        with pytest.raises(EmployeeNotFoundError):
            await service.get_employee(created.id)

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, db_session: AsyncSession) -> None:
        with pytest.raises(EmployeeNotFoundError):
            await EmployeeService(db_session).delete_employee(404)

    @pytest.mark.asyncio
    async def test_list_pages(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        for lastname in ("Curie", "Babbage", "Noether"):
            await service.create_employee(EmployeeCreate(lastname=lastname))

        listing = await service.list_employees(page=2, page_size=2)

        assert listing.total == 3
        assert listing.page == 2
        assert listing.page_size == 2
        assert [item.lastname for item in listing.items] == ["Noether"]

    @pytest.mark.asyncio
    async def test_export_csv(self, db_session: AsyncSession) -> None:
        service = EmployeeService(db_session)
        first = await service.create_employee(ADA)
        second = await service.create_employee(EmployeeCreate(firstname="Grace"))

        rows = list(csv.reader(io.StringIO(await service.export_csv())))

        assert rows[0] == list(EMPLOYEE_FIELDS)
        assert rows[1] == [str(first.id), "Ada", "Lovelace", "ada@example.com", "1 Infinite Loop", "555-0100"]
        assert rows[2] == [str(second.id), "Grace", "", "", "", ""]

    @pytest.mark.asyncio
    async def test_export_truncation_is_logged(
        self,
        db_session: AsyncSession,
        caplog: pytest.LogCaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(employee_service, "MAX_EXPORT_ROWS", 2)
        service = EmployeeService(db_session)
        for lastname in ("Curie", "Babbage", "Noether"):
            await service.create_employee(EmployeeCreate(lastname=lastname))

        with caplog.at_level(logging.WARNING, logger="employee_api.services.employee_service"):
            rows = list(csv.reader(io.StringIO(await service.export_csv())))

        assert len(rows) == 3
        assert "truncated to 2 of 3 rows" in caplog.text

    @pytest.mark.asyncio
    async def test_export_at_limit_is_not_logged(
        self,
        db_session: AsyncSession,
        caplog: pytest.LogCaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(employee_service, "MAX_EXPORT_ROWS", 2)
        service = EmployeeService(db_session)
        for lastname in ("Curie", "Babbage"):
            await service.create_employee(EmployeeCreate(lastname=lastname))

        with caplog.at_level(logging.WARNING, logger="employee_api.services.employee_service"):
            await service.export_csv()

        assert "truncated" not in caplog.text

    @pytest.mark.asyncio
    async def test_export_empty(self, db_session: AsyncSession) -> None:
        rows = list(csv.reader(io.StringIO(await EmployeeService(db_session).export_csv())))

        assert rows == [list(EMPLOYEE_FIELDS)]
