"""Async engine and session handling for the employees database."""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from employee_api.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled asyncpg engine described by the settings."""
    return create_async_engine(
        settings.async_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        # Stale connections are replaced on checkout
        pool_pre_ping=True,
        pool_recycle=3600,
        # Statements carry personal data
        echo=False,
    )


engine = build_engine(get_settings())

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@asynccontextmanager
async def session_scope(
    maker: async_sessionmaker[AsyncSession] = async_session_maker,
) -> AsyncIterator[AsyncSession]:
    """Open a session that commits on success and rolls back on database errors."""
    async with maker() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            logger.warning("Rolling back session after database error")
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async with session_scope() as session:
        yield session
