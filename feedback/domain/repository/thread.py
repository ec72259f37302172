"""Thread repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from feedback.domain.model.thread import Thread
from feedback.domain.value import ThreadId, ThreadStatus


class ThreadRepository(ABC):
    """Repository for Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID, whatever its status.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[ThreadStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Thread]:
        """Find threads ordered by creation time, newest first.

        Args:
            status: Only return threads with this status (None for all)
            limit: Maximum number of threads to return (None for no limit)
            offset: Number of threads to skip

        Returns:
            List of threads matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, status: Optional[ThreadStatus] = None) -> int:
        """Count threads, optionally restricted to one status.

        Args:
            status: Only count threads with this status (None for all)

        Returns:
            Number of matching threads
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread.

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def update_status(
        self, thread_id: ThreadId, status: ThreadStatus, updated_at: datetime
    ) -> Optional[Thread]:
        """Set the status of a thread.

        Args:
            thread_id: ID of the thread to update
            status: New status
            updated_at: Modification timestamp

        Returns:
            Updated thread, or None if the thread doesn't exist
        """
        pass
