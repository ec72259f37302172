"""PostgreSQL implementation of Thread repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.domain.model import Thread
from feedback.domain.repository.thread import ThreadRepository
from feedback.domain.value import ThreadId, ThreadStatus
from feedback.persistence.error import storage_errors
from feedback.persistence.mappers import row_to_thread, thread_to_dict
from feedback.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            with storage_errors("threads.find_by_id"):
                stmt = select(threads_table).where(threads_table.c.id == thread_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                return None
            return row_to_thread(row._asdict())

    async def find_all(
        self,
        status: Optional[ThreadStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Thread]:
        """Find threads newest first, optionally filtered by status."""
        with logfire.span(
            "thread_repository.find_all",
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(threads_table)
            if status is not None:
                stmt = stmt.where(threads_table.c.status == status.value)
            stmt = stmt.order_by(desc(threads_table.c.created_at)).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)

            with storage_errors("threads.find_all"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_thread(row._asdict()) for row in rows]

    async def count(self, status: Optional[ThreadStatus] = None) -> int:
        """Count threads, optionally restricted to one status."""
        stmt = select(func.count()).select_from(threads_table)
        if status is not None:
            stmt = stmt.where(threads_table.c.status == status.value)

        with storage_errors("threads.count"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread."""
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            with storage_errors("threads.insert"):
                stmt = insert(threads_table).values(**thread_to_dict(thread))
                await self.session.execute(stmt)
                await self.session.flush()
            return thread

    async def update_status(
        self, thread_id: ThreadId, status: ThreadStatus, updated_at: datetime
    ) -> Optional[Thread]:
        """Set a thread's status; returns the updated thread or None if missing."""
        with logfire.span(
            "thread_repository.update_status",
            thread_id=str(thread_id),
            status=status.value,
        ):
            stmt = (
                update(threads_table)
                .where(threads_table.c.id == thread_id)
                .values(status=status.value, updated_at=updated_at)
                .returning(threads_table)
            )
            with storage_errors("threads.update"):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            if not row:
                logfire.warn("Thread to update not found", thread_id=str(thread_id))
                return None
            return row_to_thread(row._asdict())
