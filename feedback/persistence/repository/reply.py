"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.domain.model import Reply
from feedback.domain.repository.reply import ReplyRepository
from feedback.domain.value import ReplyId, ThreadId
from feedback.persistence.error import storage_errors
from feedback.persistence.mappers import reply_to_dict, row_to_reply
from feedback.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        with storage_errors("replies.find_by_id"):
            stmt = select(replies_table).where(replies_table.c.id == reply_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

        return row_to_reply(row._asdict()) if row else None

    async def find_by_thread(self, thread_id: ThreadId) -> List[Reply]:
        """Find all replies on a thread, oldest first."""
        with logfire.span("reply_repository.find_by_thread", thread_id=str(thread_id)):
            stmt = (
                select(replies_table)
                .where(replies_table.c.thread_id == thread_id)
                .order_by(replies_table.c.created_at)
            )
            with storage_errors("replies.find_by_thread"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_reply(row._asdict()) for row in rows]

    async def find_by_threads(self, thread_ids: Sequence[ThreadId]) -> List[Reply]:
        """Find replies of several threads in one query, oldest first."""
        if not thread_ids:
            return []

        stmt = (
            select(replies_table)
            .where(replies_table.c.thread_id.in_(list(thread_ids)))
            .order_by(replies_table.c.created_at)
        )
        with storage_errors("replies.find_by_threads"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        return [row_to_reply(row._asdict()) for row in rows]

    async def count_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, int]:
        """Count replies for several threads in one grouped query."""
        counts: dict[ThreadId, int] = {thread_id: 0 for thread_id in thread_ids}
        if not thread_ids:
            return counts

        stmt = (
            select(replies_table.c.thread_id, func.count().label("replies"))
            .where(replies_table.c.thread_id.in_(list(thread_ids)))
            .group_by(replies_table.c.thread_id)
        )
        with storage_errors("replies.count_by_threads"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        for row in rows:
            counts[ThreadId(row.thread_id)] = row.replies
        return counts

    async def save(self, reply: Reply) -> Reply:
        """Insert a new reply."""
        with logfire.span(
            "reply_repository.save",
            reply_id=str(reply.id),
            thread_id=str(reply.thread_id),
        ):
            # The thread foreign key rejects replies to unknown threads
            with storage_errors("replies.insert"):
                stmt = insert(replies_table).values(**reply_to_dict(reply))
                await self.session.execute(stmt)
                await self.session.flush()
            return reply
