"""Mock persistence providers for testing."""

from dishka import Scope, provide

from feedback.domain.repository import (
    NewsRepository,
    ReactionRepository,
    ReplyRepository,
    ThreadRepository,
    WarningRepository,
)
from feedback.persistence.memory import InMemoryStore
from feedback.persistence.repository.inmemory import (
    InMemoryNewsRepository,
    InMemoryReactionRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
    InMemoryWarningRepository,
)
from feedback.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data written in one HTTP request is visible
    in the next; each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory table store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, store: InMemoryStore) -> ThreadRepository:
        """Provide in-memory Thread repository."""
        return InMemoryThreadRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, store: InMemoryStore) -> ReplyRepository:
        """Provide in-memory Reply repository."""
        return InMemoryReplyRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, store: InMemoryStore) -> ReactionRepository:
        """Provide in-memory Reaction repository."""
        return InMemoryReactionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_warning_repository(self, store: InMemoryStore) -> WarningRepository:
        """Provide in-memory Warning repository."""
        return InMemoryWarningRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_news_repository(self, store: InMemoryStore) -> NewsRepository:
        """Provide in-memory News repository."""
        return InMemoryNewsRepository(store)
