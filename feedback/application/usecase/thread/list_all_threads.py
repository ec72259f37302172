"""List all threads use case (moderator audit view)."""

import logfire
from pydantic import BaseModel

from feedback.application.usecase.view import (
    ReplyItem,
    ThreadSummary,
    WarningBadge,
    WarningItem,
)
from feedback.domain.service import (
    ReactionService,
    ReplyService,
    ThreadService,
    WarningService,
)
from feedback.domain.value import AnonymousId, ReactionCounts


class AuditThreadItem(ThreadSummary):
    """Thread with everything the moderator needs to review it."""

    replies: list[ReplyItem]
    warnings: list[WarningItem]  # Warnings issued in this thread's context


class ListAllThreadsResponse(BaseModel):
    """List all threads response."""

    threads: list[AuditThreadItem]
    total: int


class ListAllThreadsUseCase:
    """Use case for the moderator's audit listing: every status, newest first."""

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        reaction_service: ReactionService,
        warning_service: WarningService,
    ) -> None:
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.reaction_service = reaction_service
        self.warning_service = warning_service

    async def execute(self) -> ListAllThreadsResponse:
        """Execute audit listing flow.

        Deleted threads are tombstones and stay visible here. Replies,
        counts, context warnings and author badges are each loaded with one
        batch query for the whole listing.
        """
        with logfire.span("list_all_threads.execute"):
            threads = await self.thread_service.list_all_threads()
            thread_ids = [thread.id for thread in threads]
            replies_by_thread = await self.reply_service.list_replies_for_threads(
                thread_ids
            )
            warnings_by_thread = await self.warning_service.warnings_for_threads(
                thread_ids
            )
            counts = await self.reaction_service.get_counts_for_threads(thread_ids)

            # One badge lookup for every author on the page
            authors: list[AnonymousId] = [thread.anonymous_id for thread in threads]
            for replies in replies_by_thread.values():
                authors.extend(r.anonymous_id for r in replies if r.anonymous_id)
            badges = await self.warning_service.effective_warnings(authors)

            items = []
            for thread in threads:
                thread_counts = counts.get(thread.id, ReactionCounts())
                items.append(
                    AuditThreadItem(
                        thread_id=str(thread.id),
                        content=thread.content,
                        rating=thread.rating,
                        anonymous_id=thread.anonymous_id.root,
                        status=thread.status,
                        image_url=thread.image_url,
                        created_at=thread.created_at,
                        updated_at=thread.updated_at,
                        likes=thread_counts.likes,
                        dislikes=thread_counts.dislikes,
                        author_warning=WarningBadge.from_warning(
                            badges.get(thread.anonymous_id)
                        ),
                        replies=[
                            ReplyItem.from_reply(
                                reply,
                                badges.get(reply.anonymous_id)
                                if reply.anonymous_id
                                else None,
                            )
                            for reply in replies_by_thread[thread.id]
                        ],
                        warnings=[
                            WarningItem.from_warning(w)
                            for w in warnings_by_thread[thread.id]
                        ],
                    )
                )

            logfire.info("Audit listing built", count=len(items))
            return ListAllThreadsResponse(threads=items, total=len(items))
