"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from feedback.domain.model.reply import Reply
from feedback.domain.value import ReplyId, ThreadId


class ReplyRepository(ABC):
    """Repository for Reply entity."""

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID.

        Args:
            reply_id: The reply's unique identifier

        Returns:
            The reply if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Reply]:
        """Find all replies of a thread, oldest first.

        Args:
            thread_id: The owning thread

        Returns:
            List of replies in conversation order
        """
        pass

    @abstractmethod
    async def find_by_threads(self, thread_ids: Sequence[ThreadId]) -> List[Reply]:
        """Find replies of several threads (batch query), oldest first.

        Args:
            thread_ids: The owning threads

        Returns:
            List of replies across all given threads
        """
        pass

    @abstractmethod
    async def count_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, int]:
        """Count replies for several threads (batch query).

        Args:
            thread_ids: Threads to count replies for

        Returns:
            Mapping of thread ID to reply count (threads without replies map to 0)
        """
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Insert a new reply.

        Args:
            reply: The reply to save

        Returns:
            The saved reply
        """
        pass
