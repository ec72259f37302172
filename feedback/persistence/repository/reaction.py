"""PostgreSQL implementation of Reaction repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.domain.model import Reaction
from feedback.domain.repository.reaction import ReactionRepository
from feedback.domain.value import AnonymousId, ReactionCounts, ReactionType, ThreadId
from feedback.persistence.error import storage_errors
from feedback.persistence.mappers import reaction_to_dict, row_to_reaction
from feedback.persistence.tables import thread_reactions_table

_table = thread_reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository.

    The ``uq_thread_reaction`` constraint on (thread_id, anonymous_id) is the
    correctness backstop for concurrent toggles: ``upsert`` goes through
    ``ON CONFLICT DO UPDATE`` so racing casts never produce a second row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_thread_and_identity(
        self, thread_id: ThreadId, anonymous_id: AnonymousId
    ) -> Optional[Reaction]:
        """Find the reaction of one vote identity on a thread."""
        stmt = select(_table).where(
            _table.c.thread_id == thread_id,
            _table.c.anonymous_id == anonymous_id.root,
        )
        with storage_errors("thread_reactions.find"):
            result = await self.session.execute(stmt)
            row = result.fetchone()

        return row_to_reaction(row._asdict()) if row else None

    async def find_by_thread(self, thread_id: ThreadId) -> List[Reaction]:
        """Find all reactions on a thread, oldest first."""
        stmt = (
            select(_table)
            .where(_table.c.thread_id == thread_id)
            .order_by(_table.c.created_at)
        )
        with storage_errors("thread_reactions.find_by_thread"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        return [row_to_reaction(row._asdict()) for row in rows]

    async def find_by_identity_and_threads(
        self, anonymous_id: AnonymousId, thread_ids: Sequence[ThreadId]
    ) -> List[Reaction]:
        """Find a vote identity's reactions on several threads."""
        if not thread_ids:
            return []

        stmt = select(_table).where(
            _table.c.anonymous_id == anonymous_id.root,
            _table.c.thread_id.in_(list(thread_ids)),
        )
        with storage_errors("thread_reactions.find_by_identity"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        return [row_to_reaction(row._asdict()) for row in rows]

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction or switch the type of the existing one."""
        with logfire.span(
            "reaction_repository.upsert",
            thread_id=str(reaction.thread_id),
            reaction_type=reaction.reaction_type.value,
        ):
            stmt = insert(_table).values(**reaction_to_dict(reaction))
            stmt = stmt.on_conflict_do_update(
                index_elements=[_table.c.thread_id, _table.c.anonymous_id],
                set_={
                    "reaction_type": stmt.excluded.reaction_type,
                    "created_at": stmt.excluded.created_at,
                },
            ).returning(_table)

            with storage_errors("thread_reactions.upsert"):
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            return row_to_reaction(row._asdict()) if row else reaction

    async def delete_by_thread_and_identity(
        self, thread_id: ThreadId, anonymous_id: AnonymousId
    ) -> bool:
        """Delete the reaction of one vote identity on a thread."""
        with logfire.span(
            "reaction_repository.delete", thread_id=str(thread_id)
        ):
            stmt = delete(_table).where(
                _table.c.thread_id == thread_id,
                _table.c.anonymous_id == anonymous_id.root,
            )
            with storage_errors("thread_reactions.delete"):
                result = await self.session.execute(stmt)
                await self.session.flush()

            return (result.rowcount or 0) > 0

    async def count_by_thread(self, thread_id: ThreadId) -> ReactionCounts:
        """Count likes and dislikes on a thread."""
        counts = await self.count_by_threads([thread_id])
        return counts[thread_id]

    async def count_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, ReactionCounts]:
        """Count likes and dislikes for several threads in one grouped query."""
        if not thread_ids:
            return {}

        stmt = (
            select(
                _table.c.thread_id,
                _table.c.reaction_type,
                func.count().label("total"),
            )
            .where(_table.c.thread_id.in_(list(thread_ids)))
            .group_by(_table.c.thread_id, _table.c.reaction_type)
        )
        with storage_errors("thread_reactions.count"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        totals: dict[ThreadId, dict[str, int]] = {
            thread_id: {"likes": 0, "dislikes": 0} for thread_id in thread_ids
        }
        for row in rows:
            key = "likes" if row.reaction_type == ReactionType.LIKE.value else "dislikes"
            totals[ThreadId(row.thread_id)][key] = row.total

        return {
            thread_id: ReactionCounts(**values) for thread_id, values in totals.items()
        }
