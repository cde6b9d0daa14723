"""Session scope tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from employee_api.database import session_scope
from employee_api.models.orm import Base, EmployeeORM
from employee_api.repositories.employee_repository import EmployeeRepository


@pytest_asyncio.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


class TestSessionScope:
    """Commit and rollback behaviour outside requests."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        async with session_scope(session_maker) as session:
            created = await EmployeeRepository(session).create(lastname="Lovelace")

        async with session_maker() as session:
            assert await EmployeeRepository(session).count() == 1
            assert (await session.get(EmployeeORM, created.id)).lastname == "Lovelace"

    @pytest.mark.asyncio
    async def test_rolls_back_on_database_error(
        self, session_maker: async_sessionmaker[AsyncSession]
    ) -> None:
        with pytest.raises(OperationalError):
            async with session_scope(session_maker) as session:
                await EmployeeRepository(session).create(lastname="Lovelace")
                raise OperationalError("INSERT", {}, Exception("connection lost"))

        async with session_maker() as session:
            assert await EmployeeRepository(session).count() == 0
