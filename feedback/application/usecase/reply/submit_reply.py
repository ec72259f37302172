"""Submit reply use case."""

from uuid import UUID

from pydantic import BaseModel

from feedback.application.usecase.view import ReplyItem
from feedback.config import ContentSettings
from feedback.domain.error import ValidationError
from feedback.domain.service import IdentityService, ReplyService, ThreadService
from feedback.domain.value import AnonymousAuthor, ThreadId


class SubmitReplyRequest(BaseModel):
    """Submit reply request."""

    thread_id: str  # UUID string
    content: str


class SubmitReplyUseCase:
    """Use case for an anonymous visitor replying to a thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        identity_service: IdentityService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize submit reply use case.

        Args:
            thread_service: Thread domain service (board visibility)
            reply_service: Reply domain service
            identity_service: Issues the reply's authorship token
            content_settings: Length caps for the reply form
        """
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.identity_service = identity_service
        self.content_settings = content_settings

    async def execute(self, request: SubmitReplyRequest) -> ReplyItem:
        """Execute submit reply flow.

        Every reply gets a fresh submission identity, like a thread does.
        Only threads on the public board accept anonymous replies.

        Raises:
            ValidationError: If content is blank or too long
            NotFoundError: If the thread does not exist or is not on the board
        """
        limit = self.content_settings.reply_max_length
        if len(request.content.strip()) > limit:
            raise ValidationError(f"Reply content must be at most {limit} characters")

        thread_id = ThreadId(UUID(request.thread_id))
        await self.thread_service.require_visible_thread(thread_id)

        author = AnonymousAuthor(
            anonymous_id=self.identity_service.new_submission_identity()
        )
        reply = await self.reply_service.submit_reply(
            thread_id=thread_id,
            content=request.content,
            author=author,
        )
        return ReplyItem.from_reply(reply)
