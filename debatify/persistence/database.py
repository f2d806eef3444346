"""Async engine and per-request sessions for PostgreSQL."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from debatify.config import Settings

APPLICATION_NAME = "debatify-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine on the asyncpg driver.

    Connections announce themselves as ``debatify-api`` in
    ``pg_stat_activity`` and carry the configured statement timeout.
    """
    server_settings = {"application_name": APPLICATION_NAME}
    if settings.database.statement_timeout_ms:
        server_settings["statement_timeout"] = str(
            settings.database.statement_timeout_ms
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": server_settings},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows become frozen domain models immediately; nothing is refreshed
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """One transaction per request: commit on success, roll back on error."""
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn(
                "Rolling back request transaction",
                error_type=type(e).__name__,
                error=str(e),
            )
            await session.rollback()
            raise
        await session.commit()
