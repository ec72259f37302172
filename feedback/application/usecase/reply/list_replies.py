"""List replies use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from feedback.application.usecase.view import ReplyItem
from feedback.domain.service import ReplyService, ThreadService, WarningService
from feedback.domain.value import ThreadId


class ListRepliesRequest(BaseModel):
    """List replies request."""

    thread_id: str  # UUID string


class ListRepliesResponse(BaseModel):
    """List replies response."""

    replies: list[ReplyItem]
    total: int


class ListRepliesUseCase:
    """Use case for reading a thread's conversation with author badges."""

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        warning_service: WarningService,
    ) -> None:
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.warning_service = warning_service

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        """Execute list replies flow.

        Raises:
            NotFoundError: If the thread does not exist or is not on the board
        """
        thread_id = ThreadId(UUID(request.thread_id))

        with logfire.span("list_replies.execute", thread_id=request.thread_id):
            await self.thread_service.require_visible_thread(thread_id)
            replies = await self.reply_service.list_replies(thread_id)

            # Moderator replies carry no badge
            badges = await self.warning_service.effective_warnings(
                [reply.anonymous_id for reply in replies if reply.anonymous_id]
            )

            items = [
                ReplyItem.from_reply(
                    reply, badges.get(reply.anonymous_id) if reply.anonymous_id else None
                )
                for reply in replies
            ]
            return ListRepliesResponse(replies=items, total=len(items))
