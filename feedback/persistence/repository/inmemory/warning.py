"""In-memory warning repository for testing."""

from typing import Optional, Sequence

from feedback.domain.model.warning import ModerationWarning
from feedback.domain.repository.warning import WarningRepository
from feedback.domain.value import AnonymousId, ThreadId, WarningId
from feedback.persistence.mappers import row_to_warning, warning_to_dict
from feedback.persistence.memory import InMemoryStore, Match
from feedback.persistence.tables import user_warnings_table

TABLE = user_warnings_table.name


class InMemoryWarningRepository(WarningRepository):
    """In-memory implementation of WarningRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def _find(self, match: Match | None) -> list[ModerationWarning]:
        rows = await self.store.query(
            TABLE, match, order_by="created_at", descending=True
        )
        return [row_to_warning(row) for row in rows]

    async def find_by_id(self, warning_id: WarningId) -> Optional[ModerationWarning]:
        """Find a warning by ID."""
        warnings = await self._find({"id": warning_id})
        return warnings[0] if warnings else None

    async def find_by_identity(
        self, anonymous_id: AnonymousId
    ) -> list[ModerationWarning]:
        """Find all warnings issued against an identity, newest first."""
        return await self._find({"anonymous_id": anonymous_id.root})

    async def find_by_identities(
        self, anonymous_ids: Sequence[AnonymousId]
    ) -> list[ModerationWarning]:
        """Find warnings against any of several identities, newest first."""
        return await self._find({"anonymous_id": [a.root for a in anonymous_ids]})

    async def find_by_thread(self, thread_id: ThreadId) -> list[ModerationWarning]:
        """Find warnings whose context is the given thread, newest first."""
        return await self._find({"thread_id": thread_id})

    async def find_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> list[ModerationWarning]:
        """Find warnings whose context is any of several threads, newest first."""
        return await self._find({"thread_id": list(thread_ids)})

    async def find_all(self) -> list[ModerationWarning]:
        """Find every warning, newest first."""
        return await self._find(None)

    async def save(self, warning: ModerationWarning) -> ModerationWarning:
        """Append a warning."""
        await self.store.insert(TABLE, warning_to_dict(warning))
        return warning
