"""Moderation domain service."""

import logfire

from feedback.domain.error import ValidationError
from feedback.domain.model.reply import Reply
from feedback.domain.model.thread import Thread
from feedback.domain.model.warning import ModerationWarning
from feedback.domain.value import (
    AdminAuthor,
    AdminId,
    AnonymousId,
    ReplyId,
    ThreadId,
    ThreadStatus,
    WarningLevel,
)

from .base import Service
from .reply_service import ReplyService
from .thread_service import ThreadService
from .warning_service import WarningService


class ModerationService(Service):
    """Moderator actions over threads, replies and warnings.

    Callers resolve the admin id first (see AdminIdentityService). Each
    action is a single persistence call; listing refreshes triggered by it
    are notifications and never roll the action back.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        warning_service: WarningService,
    ) -> None:
        """Initialize moderation service.

        Args:
            thread_service: Thread domain service
            reply_service: Reply domain service
            warning_service: Warning domain service
        """
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.warning_service = warning_service

    async def archive(self, thread_id: ThreadId, admin_id: AdminId) -> Thread:
        """Hide a thread from the public board, keeping it for audit."""
        with logfire.span(
            "moderation.archive", thread_id=str(thread_id), admin_id=str(admin_id)
        ):
            return await self.thread_service.set_status(
                thread_id, ThreadStatus.ARCHIVED
            )

    async def remove(self, thread_id: ThreadId, admin_id: AdminId) -> Thread:
        """Tombstone a thread (status DELETED); the record is kept."""
        with logfire.span(
            "moderation.remove", thread_id=str(thread_id), admin_id=str(admin_id)
        ):
            return await self.thread_service.set_status(
                thread_id, ThreadStatus.DELETED
            )

    async def reply_as_admin(
        self, thread_id: ThreadId, content: str, admin_id: AdminId
    ) -> Reply:
        """Post a reply authored by the moderator."""
        with logfire.span(
            "moderation.reply_as_admin",
            thread_id=str(thread_id),
            admin_id=str(admin_id),
        ):
            return await self.reply_service.submit_reply(
                thread_id, content, AdminAuthor(admin_id=admin_id)
            )

    async def warn(
        self,
        target: AnonymousId,
        level: WarningLevel,
        reason: str,
        admin_id: AdminId,
        thread_id: ThreadId | None = None,
        reply_id: ReplyId | None = None,
    ) -> ModerationWarning:
        """Warn an anonymous identity.

        A thread or reply given as context must exist. A reply context
        implies its thread; when both are given the reply must belong to
        the thread.

        Raises:
            ValidationError: If reason is blank or the reply is on another thread
            NotFoundError: If the context thread or reply does not exist
        """
        with logfire.span(
            "moderation.warn",
            anonymous_id=target.root,
            level=level.value,
            admin_id=str(admin_id),
        ):
            if reply_id is not None:
                reply = await self.reply_service.require_reply(reply_id)
                if thread_id is None:
                    thread_id = reply.thread_id
                elif reply.thread_id != thread_id:
                    raise ValidationError(
                        f"Reply {reply_id} does not belong to thread {thread_id}"
                    )

            if thread_id is not None:
                await self.thread_service.require_thread(thread_id)

            return await self.warning_service.issue_warning(
                target=target,
                level=level,
                reason=reason,
                admin_id=admin_id,
                thread_id=thread_id,
                reply_id=reply_id,
            )
