"""PostgreSQL implementation of Warning repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.domain.model import ModerationWarning
from feedback.domain.repository.warning import WarningRepository
from feedback.domain.value import AnonymousId, ThreadId, WarningId
from feedback.persistence.error import storage_errors
from feedback.persistence.mappers import row_to_warning, warning_to_dict
from feedback.persistence.tables import user_warnings_table


class PostgresWarningRepository(WarningRepository):
    """PostgreSQL implementation of WarningRepository.

    Warnings are append-only: there is no update or delete.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch(self, operation: str, stmt) -> List[ModerationWarning]:
        stmt = stmt.order_by(desc(user_warnings_table.c.created_at))
        with storage_errors(operation):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_warning(row._asdict()) for row in rows]

    async def find_by_id(self, warning_id: WarningId) -> Optional[ModerationWarning]:
        """Find a warning by ID."""
        stmt = select(user_warnings_table).where(
            user_warnings_table.c.id == warning_id
        )
        warnings = await self._fetch("user_warnings.find_by_id", stmt)
        return warnings[0] if warnings else None

    async def find_by_identity(
        self, anonymous_id: AnonymousId
    ) -> List[ModerationWarning]:
        """Find all warnings issued against an identity, newest first."""
        stmt = select(user_warnings_table).where(
            user_warnings_table.c.anonymous_id == anonymous_id.root
        )
        return await self._fetch("user_warnings.find_by_identity", stmt)

    async def find_by_identities(
        self, anonymous_ids: Sequence[AnonymousId]
    ) -> List[ModerationWarning]:
        """Find warnings against any of several identities, newest first."""
        if not anonymous_ids:
            return []

        stmt = select(user_warnings_table).where(
            user_warnings_table.c.anonymous_id.in_([a.root for a in anonymous_ids])
        )
        return await self._fetch("user_warnings.find_by_identities", stmt)

    async def find_by_thread(self, thread_id: ThreadId) -> List[ModerationWarning]:
        """Find warnings whose context is the given thread, newest first."""
        stmt = select(user_warnings_table).where(
            user_warnings_table.c.thread_id == thread_id
        )
        return await self._fetch("user_warnings.find_by_thread", stmt)

    async def find_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> List[ModerationWarning]:
        """Find warnings whose context is any of several threads, newest first."""
        if not thread_ids:
            return []

        stmt = select(user_warnings_table).where(
            user_warnings_table.c.thread_id.in_(list(thread_ids))
        )
        return await self._fetch("user_warnings.find_by_threads", stmt)

    async def find_all(self) -> List[ModerationWarning]:
        """Find every warning, newest first."""
        with logfire.span("warning_repository.find_all"):
            return await self._fetch(
                "user_warnings.find_all", select(user_warnings_table)
            )

    async def save(self, warning: ModerationWarning) -> ModerationWarning:
        """Append a warning."""
        with logfire.span(
            "warning_repository.save",
            warning_id=str(warning.id),
            level=warning.warning_level.value,
        ):
            with storage_errors("user_warnings.insert"):
                stmt = insert(user_warnings_table).values(**warning_to_dict(warning))
                await self.session.execute(stmt)
                await self.session.flush()
            return warning
