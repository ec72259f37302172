"""Admin reply use case."""

from uuid import UUID

from pydantic import BaseModel

from feedback.application.usecase.view import ReplyItem
from feedback.domain.service import ModerationService
from feedback.domain.value import AdminId, ThreadId


class AdminReplyRequest(BaseModel):
    """Admin reply request."""

    thread_id: str  # UUID string
    content: str
    admin_id: str  # Resolved from the admin token


class AdminReplyUseCase:
    """Use case for the moderator answering on a thread.

    No length cap applies, and archived threads can still be answered.
    """

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: AdminReplyRequest) -> ReplyItem:
        """Execute admin reply flow.

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the thread does not exist
        """
        reply = await self.moderation_service.reply_as_admin(
            ThreadId(UUID(request.thread_id)),
            request.content,
            AdminId(UUID(request.admin_id)),
        )
        return ReplyItem.from_reply(reply)
