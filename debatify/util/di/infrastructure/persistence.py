"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from debatify.config import Settings
from debatify.domain.repository import (
    ContentRepository,
    NotificationRepository,
    OneTimeCodeRepository,
    UserRepository,
)
from debatify.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
)
from debatify.persistence.repository import (
    PostgresContentRepository,
    PostgresNotificationRepository,
    PostgresOneTimeCodeRepository,
    PostgresUserRepository,
)
from debatify.util.di.base import ProviderBase
from debatify.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise.
        """
        async with get_session(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_content_repository(self, session: AsyncSession) -> ContentRepository:
        """Provide ContentItem repository."""
        return PostgresContentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_one_time_code_repository(
        self, session: AsyncSession
    ) -> OneTimeCodeRepository:
        """Provide OneTimeCode repository."""
        return PostgresOneTimeCodeRepository(session)
