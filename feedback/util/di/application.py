"""Application layer DI providers."""

from dishka import Scope, provide

from feedback.adapter.storage import BlobStore
from feedback.application.usecase.moderation import (
    AdminReplyUseCase,
    ArchiveThreadUseCase,
    DeleteThreadUseCase,
    ListWarningsUseCase,
    WarnUserUseCase,
)
from feedback.application.usecase.news import ListNewsUseCase, PublishNewsUseCase
from feedback.application.usecase.reaction import (
    CastReactionUseCase,
    GetReactionsUseCase,
)
from feedback.application.usecase.reply import ListRepliesUseCase, SubmitReplyUseCase
from feedback.application.usecase.thread import (
    ListActiveThreadsUseCase,
    ListAllThreadsUseCase,
    SubmitThreadUseCase,
    UploadImageUseCase,
)
from feedback.config import ContentSettings
from feedback.domain.service import (
    IdentityService,
    ModerationService,
    NewsService,
    ReactionService,
    ReplyService,
    ThreadService,
    WarningService,
)
from feedback.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Thread use cases
    @provide
    def get_submit_thread_use_case(
        self, thread_service: ThreadService, content_settings: ContentSettings
    ) -> SubmitThreadUseCase:
        """Provide submit thread use case."""
        return SubmitThreadUseCase(
            thread_service=thread_service, content_settings=content_settings
        )

    @provide
    def get_list_active_threads_use_case(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        reaction_service: ReactionService,
        warning_service: WarningService,
    ) -> ListActiveThreadsUseCase:
        """Provide list active threads use case."""
        return ListActiveThreadsUseCase(
            thread_service=thread_service,
            reply_service=reply_service,
            reaction_service=reaction_service,
            warning_service=warning_service,
        )

    @provide
    def get_list_all_threads_use_case(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        reaction_service: ReactionService,
        warning_service: WarningService,
    ) -> ListAllThreadsUseCase:
        """Provide audit listing use case."""
        return ListAllThreadsUseCase(
            thread_service=thread_service,
            reply_service=reply_service,
            reaction_service=reaction_service,
            warning_service=warning_service,
        )

    @provide
    def get_upload_image_use_case(
        self, blob_store: BlobStore, content_settings: ContentSettings
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(
            blob_store=blob_store, content_settings=content_settings
        )

    # Reply use cases
    @provide
    def get_submit_reply_use_case(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        identity_service: IdentityService,
        content_settings: ContentSettings,
    ) -> SubmitReplyUseCase:
        """Provide submit reply use case."""
        return SubmitReplyUseCase(
            thread_service=thread_service,
            reply_service=reply_service,
            identity_service=identity_service,
            content_settings=content_settings,
        )

    @provide
    def get_list_replies_use_case(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        warning_service: WarningService,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            thread_service=thread_service,
            reply_service=reply_service,
            warning_service=warning_service,
        )

    # Reaction use cases
    @provide
    def get_cast_reaction_use_case(
        self, thread_service: ThreadService, reaction_service: ReactionService
    ) -> CastReactionUseCase:
        """Provide cast reaction use case."""
        return CastReactionUseCase(
            thread_service=thread_service, reaction_service=reaction_service
        )

    @provide
    def get_reactions_use_case(
        self, thread_service: ThreadService, reaction_service: ReactionService
    ) -> GetReactionsUseCase:
        """Provide get reactions use case."""
        return GetReactionsUseCase(
            thread_service=thread_service, reaction_service=reaction_service
        )

    # Moderation use cases
    @provide
    def get_archive_thread_use_case(
        self, moderation_service: ModerationService
    ) -> ArchiveThreadUseCase:
        """Provide archive thread use case."""
        return ArchiveThreadUseCase(moderation_service=moderation_service)

    @provide
    def get_delete_thread_use_case(
        self, moderation_service: ModerationService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(moderation_service=moderation_service)

    @provide
    def get_admin_reply_use_case(
        self, moderation_service: ModerationService
    ) -> AdminReplyUseCase:
        """Provide admin reply use case."""
        return AdminReplyUseCase(moderation_service=moderation_service)

    @provide
    def get_warn_user_use_case(
        self, moderation_service: ModerationService, warning_service: WarningService
    ) -> WarnUserUseCase:
        """Provide warn user use case."""
        return WarnUserUseCase(
            moderation_service=moderation_service, warning_service=warning_service
        )

    @provide
    def get_list_warnings_use_case(
        self, warning_service: WarningService
    ) -> ListWarningsUseCase:
        """Provide list warnings use case."""
        return ListWarningsUseCase(warning_service=warning_service)

    # News use cases
    @provide
    def get_list_news_use_case(self, news_service: NewsService) -> ListNewsUseCase:
        """Provide list news use case."""
        return ListNewsUseCase(news_service=news_service)

    @provide
    def get_publish_news_use_case(
        self, news_service: NewsService
    ) -> PublishNewsUseCase:
        """Provide publish news use case."""
        return PublishNewsUseCase(news_service=news_service)
