"""In-memory thread repository for testing."""

from datetime import datetime
from typing import Optional

from feedback.domain.model.thread import Thread
from feedback.domain.repository.thread import ThreadRepository
from feedback.domain.value import ThreadId, ThreadStatus
from feedback.persistence.mappers import row_to_thread, thread_to_dict
from feedback.persistence.memory import InMemoryStore
from feedback.persistence.tables import threads_table

TABLE = threads_table.name


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        rows = await self.store.query(TABLE, {"id": thread_id})
        return row_to_thread(rows[0]) if rows else None

    async def find_all(
        self,
        status: Optional[ThreadStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Thread]:
        """Find threads newest first, optionally filtered by status."""
        match = {"status": status.value} if status is not None else None
        rows = await self.store.query(
            TABLE, match, order_by="created_at", descending=True
        )
        end = None if limit is None else offset + limit
        return [row_to_thread(row) for row in rows[offset:end]]

    async def count(self, status: Optional[ThreadStatus] = None) -> int:
        """Count threads, optionally restricted to one status."""
        match = {"status": status.value} if status is not None else None
        return len(await self.store.query(TABLE, match))

    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread."""
        await self.store.insert(TABLE, thread_to_dict(thread))
        return thread

    async def update_status(
        self, thread_id: ThreadId, status: ThreadStatus, updated_at: datetime
    ) -> Optional[Thread]:
        """Set a thread's status."""
        rows = await self.store.update(
            TABLE,
            {"id": thread_id},
            {"status": status.value, "updated_at": updated_at},
        )
        return row_to_thread(rows[0]) if rows else None
