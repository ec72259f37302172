"""Get reactions use case."""

from uuid import UUID

from pydantic import BaseModel

from feedback.domain.service import ReactionService, ThreadService
from feedback.domain.value import AnonymousId, ThreadId

from .cast_reaction import ReactionStateResponse


class GetReactionsRequest(BaseModel):
    """Get reactions request."""

    thread_id: str  # UUID string
    vote_identity: str | None = None


class GetReactionsUseCase:
    """Use case for reading a thread's counts and the caller's vote."""

    def __init__(
        self, thread_service: ThreadService, reaction_service: ReactionService
    ) -> None:
        self.thread_service = thread_service
        self.reaction_service = reaction_service

    async def execute(self, request: GetReactionsRequest) -> ReactionStateResponse:
        """Execute get reactions flow.

        Raises:
            NotFoundError: If the thread does not exist or is not on the board
        """
        thread_id = ThreadId(UUID(request.thread_id))
        await self.thread_service.require_visible_thread(thread_id)

        counts = await self.reaction_service.get_counts(thread_id)
        my_reaction = None
        if request.vote_identity:
            my_reaction = await self.reaction_service.get_reaction(
                thread_id, AnonymousId(request.vote_identity)
            )

        return ReactionStateResponse(
            thread_id=request.thread_id,
            likes=counts.likes,
            dislikes=counts.dislikes,
            my_reaction=my_reaction,
        )
