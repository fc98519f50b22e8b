"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ident.config import Settings
from ident.domain.repository import (
    EphemeralKeyRepository,
    InviteRepository,
    UnitOfWork,
)
from ident.persistence.database import create_engine, create_session_factory, init_schema
from ident.persistence.repository import (
    SqlEphemeralKeyRepository,
    SqlInviteRepository,
    SqlUnitOfWork,
)
from ident.util.di.base import ProviderBase
from ident.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL or SQLite."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, creating missing tables if configured.

        The engine is disposed when the container closes.
        """
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        if settings.database.auto_create_schema:
            await init_schema(engine)
        yield engine
        await engine.dispose()

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

        Writes are committed explicitly through the unit of work, before the
        response is sent. Anything left uncommitted when the request ends is
        rolled back as the session closes.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return SqlInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_ephemeral_key_repository(
        self, session: AsyncSession
    ) -> EphemeralKeyRepository:
        """Provide EphemeralKey repository."""
        return SqlEphemeralKeyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work committing the request's session."""
        return SqlUnitOfWork(session)
