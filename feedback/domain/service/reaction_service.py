"""Reaction domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from feedback.domain.model.reaction import Reaction
from feedback.domain.repository import ReactionRepository
from feedback.domain.value import (
    AnonymousId,
    ReactionCounts,
    ReactionId,
    ReactionType,
    ThreadId,
)

from .base import Service
from .thread_service import ThreadService


class ReactionService(Service):
    """Domain service for like/dislike votes on threads."""

    def __init__(
        self, reaction_repository: ReactionRepository, thread_service: ThreadService
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            thread_service: Thread domain service (existence checks)
        """
        self.reaction_repository = reaction_repository
        self.thread_service = thread_service

    async def cast_reaction(
        self,
        thread_id: ThreadId,
        vote_identity: AnonymousId,
        reaction_type: ReactionType,
    ) -> ReactionCounts:
        """Toggle a vote on a thread.

        - Same type as the existing vote: the vote is removed
        - Different type: the vote is switched
        - No vote yet: the vote is added

        This is a read-then-write. Two racing casts for the same identity
        may lose one update, but the repository's unique key on
        (thread, identity) keeps it to at most one row.

        Args:
            thread_id: Thread being voted on
            vote_identity: The voter's vote identity
            reaction_type: Like or dislike

        Returns:
            Updated counts for the thread

        Raises:
            NotFoundError: If the thread does not exist
        """
        with logfire.span(
            "reaction_service.cast_reaction",
            thread_id=str(thread_id),
            anonymous_id=vote_identity.root,
            reaction_type=reaction_type.value,
        ):
            await self.thread_service.require_thread(thread_id)

            existing = await self.reaction_repository.find_by_thread_and_identity(
                thread_id, vote_identity
            )

            if existing and existing.reaction_type == reaction_type:
                await self.reaction_repository.delete_by_thread_and_identity(
                    thread_id, vote_identity
                )
                logfire.info(
                    "Reaction removed",
                    thread_id=str(thread_id),
                    reaction_type=reaction_type.value,
                )
            else:
                reaction = Reaction(
                    id=existing.id if existing else ReactionId(uuid4()),
                    thread_id=thread_id,
                    anonymous_id=vote_identity,
                    reaction_type=reaction_type,
                    created_at=datetime.now(),
                )
                await self.reaction_repository.upsert(reaction)
                logfire.info(
                    "Reaction switched" if existing else "Reaction added",
                    thread_id=str(thread_id),
                    reaction_type=reaction_type.value,
                )

            return await self.reaction_repository.count_by_thread(thread_id)

    async def get_counts(self, thread_id: ThreadId) -> ReactionCounts:
        """Count likes and dislikes on a thread.

        Args:
            thread_id: Thread ID

        Returns:
            Aggregate counts
        """
        return await self.reaction_repository.count_by_thread(thread_id)

    async def get_reaction(
        self, thread_id: ThreadId, vote_identity: AnonymousId
    ) -> ReactionType | None:
        """Get the current vote of an identity on a thread.

        Args:
            thread_id: Thread ID
            vote_identity: The voter's vote identity

        Returns:
            The reaction type, or None if the identity has not voted
        """
        reaction = await self.reaction_repository.find_by_thread_and_identity(
            thread_id, vote_identity
        )
        return reaction.reaction_type if reaction else None

    async def get_counts_for_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, ReactionCounts]:
        """Count likes and dislikes for several threads in one query."""
        if not thread_ids:
            return {}
        return await self.reaction_repository.count_by_threads(thread_ids)

    async def get_reactions_for_threads(
        self, vote_identity: AnonymousId, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, ReactionType]:
        """Map each thread the identity voted on to its vote.

        Args:
            vote_identity: The voter's vote identity
            thread_ids: Threads to check

        Returns:
            Mapping of thread ID to reaction type (threads without a vote are absent)
        """
        if not thread_ids:
            return {}

        reactions = await self.reaction_repository.find_by_identity_and_threads(
            vote_identity, thread_ids
        )
        return {reaction.thread_id: reaction.reaction_type for reaction in reactions}
