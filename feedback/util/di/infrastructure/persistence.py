"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from feedback.config import Settings
from feedback.domain.event import ThreadChangeOutbox
from feedback.domain.repository import (
    NewsRepository,
    ReactionRepository,
    ReplyRepository,
    ThreadRepository,
    WarningRepository,
)
from feedback.persistence.database import create_engine, create_session_factory
from feedback.persistence.repository import (
    PostgresNewsRepository,
    PostgresReactionRepository,
    PostgresReplyRepository,
    PostgresThreadRepository,
    PostgresWarningRepository,
)
from feedback.util.di.base import ProviderBase
from feedback.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
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
        self,
        session_factory: async_sessionmaker[AsyncSession],
        outbox: ThreadChangeOutbox,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. The outbox is created
        before the session and closed after it, so thread changes are only
        published once the commit succeeded.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                outbox.discard()
                raise

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, session: AsyncSession) -> ReplyRepository:
        """Provide Reply repository."""
        return PostgresReplyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, session: AsyncSession) -> ReactionRepository:
        """Provide Reaction repository."""
        return PostgresReactionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_warning_repository(self, session: AsyncSession) -> WarningRepository:
        """Provide Warning repository."""
        return PostgresWarningRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_news_repository(self, session: AsyncSession) -> NewsRepository:
        """Provide News repository."""
        return PostgresNewsRepository(session)
