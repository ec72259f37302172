"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from feedback.domain.model.reaction import Reaction
from feedback.domain.value import AnonymousId, ReactionCounts, ThreadId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    (thread_id, anonymous_id) is a unique key. Implementations must make
    ``upsert`` replace an existing row for the key rather than add a second.
    """

    @abstractmethod
    async def find_by_thread_and_identity(
        self, thread_id: ThreadId, anonymous_id: AnonymousId
    ) -> Optional[Reaction]:
        """Find the reaction of one vote identity on a thread.

        Args:
            thread_id: The thread
            anonymous_id: The vote identity

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Reaction]:
        """Find all reactions on a thread.

        Args:
            thread_id: The thread

        Returns:
            List of reactions on the thread
        """
        pass

    @abstractmethod
    async def find_by_identity_and_threads(
        self, anonymous_id: AnonymousId, thread_ids: Sequence[ThreadId]
    ) -> List[Reaction]:
        """Find a vote identity's reactions on several threads (batch query).

        Args:
            anonymous_id: The vote identity
            thread_ids: Threads to check

        Returns:
            List of reactions by the identity on the given threads
        """
        pass

    @abstractmethod
    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction, replacing any existing one for the same key.

        Args:
            reaction: The reaction to store

        Returns:
            The stored reaction
        """
        pass

    @abstractmethod
    async def delete_by_thread_and_identity(
        self, thread_id: ThreadId, anonymous_id: AnonymousId
    ) -> bool:
        """Delete the reaction of one vote identity on a thread.

        Args:
            thread_id: The thread
            anonymous_id: The vote identity

        Returns:
            True if a reaction was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_thread(self, thread_id: ThreadId) -> ReactionCounts:
        """Count likes and dislikes on a thread.

        Args:
            thread_id: The thread

        Returns:
            Aggregate counts
        """
        pass

    @abstractmethod
    async def count_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, ReactionCounts]:
        """Count likes and dislikes for several threads (batch query).

        Args:
            thread_ids: Threads to count reactions for

        Returns:
            Mapping of thread ID to counts (threads without reactions map to zero counts)
        """
        pass
