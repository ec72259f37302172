"""Domain layer DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from feedback.config import AdminSettings
from feedback.domain.event import ThreadChangeNotifier, ThreadChangeOutbox
from feedback.domain.repository import (
    NewsRepository,
    ReactionRepository,
    ReplyRepository,
    ThreadRepository,
    WarningRepository,
)
from feedback.domain.service import (
    AdminIdentityService,
    IdentityService,
    ModerationService,
    NewsService,
    ReactionService,
    ReplyService,
    ThreadService,
    WarningService,
)
from feedback.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Stateless services and the change notifier live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_thread_change_notifier(self) -> ThreadChangeNotifier:
        """Provide the process-wide thread change notifier."""
        return ThreadChangeNotifier()

    @provide
    async def get_thread_change_outbox(
        self, notifier: ThreadChangeNotifier
    ) -> AsyncIterator[ThreadChangeOutbox]:
        """Provide the request's thread change outbox.

        Recorded changes are published when the request scope closes without
        an error. The persistence session depends on the outbox, so it is
        committed (or rolled back and the outbox discarded) first.
        """
        outbox = ThreadChangeOutbox(notifier)
        yield outbox
        await outbox.flush()

    @provide(scope=Scope.APP)
    def get_identity_service(self) -> IdentityService:
        """Provide anonymous identity service."""
        return IdentityService()

    @provide(scope=Scope.APP)
    def get_admin_identity_service(
        self, admin_settings: AdminSettings
    ) -> AdminIdentityService:
        """Provide admin identity service."""
        return AdminIdentityService(admin_settings=admin_settings)

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        identity_service: IdentityService,
        outbox: ThreadChangeOutbox,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            identity_service=identity_service,
            outbox=outbox,
        )

    @provide
    def get_reply_service(
        self, reply_repository: ReplyRepository, thread_service: ThreadService
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            reply_repository=reply_repository, thread_service=thread_service
        )

    @provide
    def get_reaction_service(
        self, reaction_repository: ReactionRepository, thread_service: ThreadService
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository, thread_service=thread_service
        )

    @provide
    def get_warning_service(
        self, warning_repository: WarningRepository
    ) -> WarningService:
        """Provide warning domain service."""
        return WarningService(warning_repository=warning_repository)

    @provide
    def get_moderation_service(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        warning_service: WarningService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            thread_service=thread_service,
            reply_service=reply_service,
            warning_service=warning_service,
        )

    @provide
    def get_news_service(self, news_repository: NewsRepository) -> NewsService:
        """Provide news domain service."""
        return NewsService(news_repository=news_repository)
