"""Reply domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from feedback.domain.error import NotFoundError, ValidationError
from feedback.domain.model.reply import Reply
from feedback.domain.repository import ReplyRepository
from feedback.domain.value import AdminAuthor, AnonymousAuthor, ReplyId, ThreadId

from .base import Service
from .thread_service import ThreadService


class ReplyService(Service):
    """Domain service for reply operations."""

    def __init__(
        self, reply_repository: ReplyRepository, thread_service: ThreadService
    ) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
            thread_service: Thread domain service (existence checks)
        """
        self.reply_repository = reply_repository
        self.thread_service = thread_service

    async def submit_reply(
        self,
        thread_id: ThreadId,
        content: str,
        author: AnonymousAuthor | AdminAuthor,
    ) -> Reply:
        """Add a reply to a thread.

        The thread must exist; its status does not matter, so the
        moderator can still answer on archived threads.

        Args:
            thread_id: Thread being replied to
            content: Reply text (surrounding whitespace is trimmed)
            author: Anonymous visitor or moderator

        Returns:
            The saved reply

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the thread does not exist
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Reply content must not be empty")

        with logfire.span(
            "reply_service.submit_reply",
            thread_id=str(thread_id),
            author_kind=author.kind,
        ):
            await self.thread_service.require_thread(thread_id)

            reply = Reply(
                id=ReplyId(uuid4()),
                thread_id=thread_id,
                content=text,
                author=author,
                created_at=datetime.now(),
            )

            saved = await self.reply_repository.save(reply)
            logfire.info(
                "Reply created",
                reply_id=str(saved.id),
                thread_id=str(thread_id),
                author_kind=author.kind,
            )
            return saved

    async def require_reply(self, reply_id: ReplyId) -> Reply:
        """Get a reply by ID or fail.

        Raises:
            NotFoundError: If the reply does not exist
        """
        reply = await self.reply_repository.find_by_id(reply_id)
        if not reply:
            logfire.warn("Reply not found", reply_id=str(reply_id))
            raise NotFoundError("Reply", str(reply_id))
        return reply

    async def list_replies(self, thread_id: ThreadId) -> list[Reply]:
        """Get all replies of a thread, oldest first.

        Args:
            thread_id: Thread ID

        Returns:
            Replies in conversation order
        """
        with logfire.span("reply_service.list_replies", thread_id=str(thread_id)):
            replies = await self.reply_repository.find_by_thread(thread_id)
            logfire.info(
                "Replies retrieved for thread",
                thread_id=str(thread_id),
                count=len(replies),
            )
            return replies

    async def list_replies_for_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, list[Reply]]:
        """Get the replies of several threads in one query.

        Args:
            thread_ids: Thread IDs

        Returns:
            Mapping of thread ID to its replies, oldest first (every given
            thread is present, possibly with an empty list)
        """
        grouped: dict[ThreadId, list[Reply]] = {tid: [] for tid in thread_ids}
        if not thread_ids:
            return grouped

        with logfire.span(
            "reply_service.list_replies_for_threads", threads=len(thread_ids)
        ):
            for reply in await self.reply_repository.find_by_threads(thread_ids):
                grouped.setdefault(reply.thread_id, []).append(reply)
            return grouped

    async def count_replies(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, int]:
        """Count replies for several threads in one query."""
        if not thread_ids:
            return {}
        return await self.reply_repository.count_by_threads(thread_ids)
