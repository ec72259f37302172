"""In-memory reply repository for testing."""

from typing import Optional, Sequence

from feedback.domain.error import PersistenceError
from feedback.domain.model.reply import Reply
from feedback.domain.repository.reply import ReplyRepository
from feedback.domain.value import ReplyId, ThreadId
from feedback.persistence.mappers import reply_to_dict, row_to_reply
from feedback.persistence.memory import InMemoryStore
from feedback.persistence.tables import replies_table, threads_table

TABLE = replies_table.name


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        rows = await self.store.query(TABLE, {"id": reply_id})
        return row_to_reply(rows[0]) if rows else None

    async def find_by_thread(self, thread_id: ThreadId) -> list[Reply]:
        """Find all replies on a thread, oldest first."""
        rows = await self.store.query(
            TABLE, {"thread_id": thread_id}, order_by="created_at"
        )
        return [row_to_reply(row) for row in rows]

    async def find_by_threads(self, thread_ids: Sequence[ThreadId]) -> list[Reply]:
        """Find replies of several threads, oldest first."""
        rows = await self.store.query(
            TABLE, {"thread_id": list(thread_ids)}, order_by="created_at"
        )
        return [row_to_reply(row) for row in rows]

    async def count_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, int]:
        """Count replies for several threads."""
        counts: dict[ThreadId, int] = {thread_id: 0 for thread_id in thread_ids}
        for row in await self.store.query(TABLE, {"thread_id": list(thread_ids)}):
            counts[row["thread_id"]] += 1
        return counts

    async def save(self, reply: Reply) -> Reply:
        """Insert a new reply.

        Mirrors the database foreign key on replies.thread_id.
        """
        if not await self.store.query(threads_table.name, {"id": reply.thread_id}):
            raise PersistenceError(
                f"{TABLE}.insert", f"thread {reply.thread_id} does not exist"
            )
        await self.store.insert(TABLE, reply_to_dict(reply))
        return reply
