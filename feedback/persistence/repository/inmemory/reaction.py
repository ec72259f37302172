"""In-memory reaction repository for testing."""

from typing import Optional, Sequence

from feedback.domain.model.reaction import Reaction
from feedback.domain.repository.reaction import ReactionRepository
from feedback.domain.value import AnonymousId, ReactionCounts, ReactionType, ThreadId
from feedback.persistence.mappers import reaction_to_dict, row_to_reaction
from feedback.persistence.memory import InMemoryStore
from feedback.persistence.tables import thread_reactions_table

TABLE = thread_reactions_table.name


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing.

    The store enforces the (thread_id, anonymous_id) unique key.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @staticmethod
    def _key(thread_id: ThreadId, anonymous_id: AnonymousId) -> dict:
        return {"thread_id": thread_id, "anonymous_id": anonymous_id.root}

    async def find_by_thread_and_identity(
        self, thread_id: ThreadId, anonymous_id: AnonymousId
    ) -> Optional[Reaction]:
        """Find the reaction of one vote identity on a thread."""
        rows = await self.store.query(TABLE, self._key(thread_id, anonymous_id))
        return row_to_reaction(rows[0]) if rows else None

    async def find_by_thread(self, thread_id: ThreadId) -> list[Reaction]:
        """Find all reactions on a thread."""
        rows = await self.store.query(
            TABLE, {"thread_id": thread_id}, order_by="created_at"
        )
        return [row_to_reaction(row) for row in rows]

    async def find_by_identity_and_threads(
        self, anonymous_id: AnonymousId, thread_ids: Sequence[ThreadId]
    ) -> list[Reaction]:
        """Find a vote identity's reactions on several threads."""
        rows = await self.store.query(
            TABLE,
            {"anonymous_id": anonymous_id.root, "thread_id": list(thread_ids)},
        )
        return [row_to_reaction(row) for row in rows]

    async def upsert(self, reaction: Reaction) -> Reaction:
        """Insert a reaction or switch the type of the existing one."""
        key = self._key(reaction.thread_id, reaction.anonymous_id)
        patch = {
            "reaction_type": reaction.reaction_type.value,
            "created_at": reaction.created_at,
        }
        rows = await self.store.update(TABLE, key, patch)
        if rows:
            return row_to_reaction(rows[0])

        row = await self.store.insert(TABLE, reaction_to_dict(reaction))
        return row_to_reaction(row)

    async def delete_by_thread_and_identity(
        self, thread_id: ThreadId, anonymous_id: AnonymousId
    ) -> bool:
        """Delete the reaction of one vote identity on a thread."""
        return await self.store.delete(TABLE, self._key(thread_id, anonymous_id)) > 0

    async def count_by_thread(self, thread_id: ThreadId) -> ReactionCounts:
        """Count likes and dislikes on a thread."""
        return (await self.count_by_threads([thread_id]))[thread_id]

    async def count_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, ReactionCounts]:
        """Count likes and dislikes for several threads."""
        totals = {thread_id: [0, 0] for thread_id in thread_ids}
        for row in await self.store.query(TABLE, {"thread_id": list(thread_ids)}):
            index = 0 if row["reaction_type"] == ReactionType.LIKE.value else 1
            totals[row["thread_id"]][index] += 1
        return {
            thread_id: ReactionCounts(likes=likes, dislikes=dislikes)
            for thread_id, (likes, dislikes) in totals.items()
        }
