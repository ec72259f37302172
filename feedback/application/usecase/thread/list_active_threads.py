"""List active threads use case."""

import logfire
from pydantic import BaseModel, Field

from feedback.application.usecase.view import ThreadListItem, WarningBadge
from feedback.domain.service import (
    ReactionService,
    ReplyService,
    ThreadService,
    WarningService,
)
from feedback.domain.value import AnonymousId, ReactionCounts


class ListActiveThreadsRequest(BaseModel):
    """List active threads request."""

    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    vote_identity: str | None = None  # Caller's vote token, if any


class ListActiveThreadsResponse(BaseModel):
    """List active threads response."""

    threads: list[ThreadListItem]
    total: int
    limit: int
    offset: int


class ListActiveThreadsUseCase:
    """Use case for the public board: active threads, newest first."""

    def __init__(
        self,
        thread_service: ThreadService,
        reply_service: ReplyService,
        reaction_service: ReactionService,
        warning_service: WarningService,
    ) -> None:
        """Initialize list active threads use case.

        Args:
            thread_service: Thread domain service
            reply_service: Reply domain service
            reaction_service: Reaction domain service
            warning_service: Warning domain service
        """
        self.thread_service = thread_service
        self.reply_service = reply_service
        self.reaction_service = reaction_service
        self.warning_service = warning_service

    async def execute(
        self, request: ListActiveThreadsRequest
    ) -> ListActiveThreadsResponse:
        """Execute list active threads flow.

        Counts, reply totals, author badges and the caller's votes are each
        loaded with one batch query for the whole page.
        """
        with logfire.span(
            "list_active_threads.execute",
            limit=request.limit,
            offset=request.offset,
        ):
            total = await self.thread_service.count_active_threads()
            threads = await self.thread_service.list_active_threads(
                limit=request.limit, offset=request.offset
            )
            thread_ids = [thread.id for thread in threads]

            counts = await self.reaction_service.get_counts_for_threads(thread_ids)
            reply_counts = await self.reply_service.count_replies(thread_ids)
            badges = await self.warning_service.effective_warnings(
                [thread.anonymous_id for thread in threads]
            )

            my_reactions = {}
            if request.vote_identity and threads:
                my_reactions = await self.reaction_service.get_reactions_for_threads(
                    AnonymousId(request.vote_identity), thread_ids
                )

            items = []
            for thread in threads:
                thread_counts = counts.get(thread.id, ReactionCounts())
                items.append(
                    ThreadListItem(
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
                        reply_count=reply_counts.get(thread.id, 0),
                        my_reaction=my_reactions.get(thread.id),
                    )
                )

            logfire.info("Board listed", count=len(items), total=total)

            return ListActiveThreadsResponse(
                threads=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
