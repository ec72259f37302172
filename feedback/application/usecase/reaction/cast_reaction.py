"""Cast reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from feedback.domain.service import ReactionService, ThreadService
from feedback.domain.value import AnonymousId, ReactionType, ThreadId


class CastReactionRequest(BaseModel):
    """Cast reaction request."""

    thread_id: str  # UUID string
    vote_identity: str  # Caller's persisted vote token
    reaction_type: ReactionType


class ReactionStateResponse(BaseModel):
    """Counts on a thread and the caller's current vote."""

    thread_id: str
    likes: int
    dislikes: int
    my_reaction: ReactionType | None


class CastReactionUseCase:
    """Use case for toggling a like or dislike."""

    def __init__(
        self, thread_service: ThreadService, reaction_service: ReactionService
    ) -> None:
        self.thread_service = thread_service
        self.reaction_service = reaction_service

    async def execute(self, request: CastReactionRequest) -> ReactionStateResponse:
        """Execute cast reaction flow.

        Raises:
            NotFoundError: If the thread does not exist or is not on the board
        """
        thread_id = ThreadId(UUID(request.thread_id))
        vote_identity = AnonymousId(request.vote_identity)
        await self.thread_service.require_visible_thread(thread_id)

        counts = await self.reaction_service.cast_reaction(
            thread_id, vote_identity, request.reaction_type
        )
        my_reaction = await self.reaction_service.get_reaction(
            thread_id, vote_identity
        )

        return ReactionStateResponse(
            thread_id=request.thread_id,
            likes=counts.likes,
            dislikes=counts.dislikes,
            my_reaction=my_reaction,
        )
