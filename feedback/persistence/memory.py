"""In-memory table store.

Implements the four storage primitives the repositories compose from:
``insert``, ``update``, ``query`` and ``delete``. Each call is all-or-nothing
and enforces the unique keys declared per table, so the in-memory
repositories behave like the PostgreSQL ones in the cases the domain cares
about (duplicate reactions in particular).
"""

from collections.abc import Iterable, Mapping, Sequence
from copy import deepcopy
from typing import Any

from feedback.domain.error import PersistenceError

Record = dict[str, Any]
Match = Mapping[str, Any]

# Every table is keyed by "id"; extra keys mirror the database constraints
UNIQUE_KEYS: dict[str, list[tuple[str, ...]]] = {
    "thread_reactions": [("thread_id", "anonymous_id")],
}


def _matches(record: Record, match: Match | None) -> bool:
    """Equality match; a set/frozenset/list/tuple value means "one of"."""
    if not match:
        return True
    for key, expected in match.items():
        value = record.get(key)
        if isinstance(expected, (set, frozenset, list, tuple)):
            if value not in expected:
                return False
        elif value != expected:
            return False
    return True


class InMemoryStore:
    """Dict-of-lists table store used by the in-memory repositories."""

    def __init__(
        self, unique_keys: Mapping[str, Sequence[tuple[str, ...]]] | None = None
    ) -> None:
        self._tables: dict[str, list[Record]] = {}
        self._unique_keys = dict(UNIQUE_KEYS if unique_keys is None else unique_keys)

    def _rows(self, table: str) -> list[Record]:
        return self._tables.setdefault(table, [])

    def _keys(self, table: str) -> list[tuple[str, ...]]:
        return [("id",), *self._unique_keys.get(table, [])]

    def _check_unique(
        self, table: str, candidates: Iterable[Record], ignore: Sequence[Record] = ()
    ) -> None:
        """Raise if any candidate collides with a stored row or another candidate."""
        others = [r for r in self._rows(table) if not any(r is i for i in ignore)]
        for key in self._keys(table):
            seen = {tuple(r.get(c) for c in key) for r in others}
            for candidate in candidates:
                value = tuple(candidate.get(c) for c in key)
                if value in seen:
                    raise PersistenceError(
                        f"{table}.insert" if not ignore else f"{table}.update",
                        f"duplicate key {dict(zip(key, value))}",
                    )
                seen.add(value)

    async def insert(self, table: str, record: Mapping[str, Any]) -> Record:
        """Insert one row.

        Args:
            table: Table name
            record: Column values (must include "id")

        Returns:
            Copy of the stored row

        Raises:
            PersistenceError: If the row violates a unique key
        """
        row = deepcopy(dict(record))
        if row.get("id") is None:
            raise PersistenceError(f"{table}.insert", "missing primary key")
        self._check_unique(table, [row])
        self._rows(table).append(row)
        return deepcopy(row)

    async def update(
        self, table: str, match: Match, patch: Mapping[str, Any]
    ) -> list[Record]:
        """Apply ``patch`` to every row matching ``match``.

        Returns:
            Copies of the updated rows (empty if nothing matched)

        Raises:
            PersistenceError: If the patched rows would violate a unique key
        """
        targets = [r for r in self._rows(table) if _matches(r, match)]
        patched = [{**r, **deepcopy(dict(patch))} for r in targets]
        self._check_unique(table, patched, ignore=targets)

        for row in targets:
            row.update(deepcopy(dict(patch)))
        return [deepcopy(r) for r in targets]

    async def query(
        self,
        table: str,
        filter: Match | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Record]:
        """Return copies of the rows matching ``filter``.

        Args:
            table: Table name
            filter: Column equality match (None for all rows)
            order_by: Column to sort on; insertion order breaks ties
            descending: Sort direction
        """
        rows = [deepcopy(r) for r in self._rows(table) if _matches(r, filter)]
        if order_by:
            rows.sort(key=lambda r: r[order_by], reverse=descending)
        return rows

    async def delete(self, table: str, match: Match) -> int:
        """Delete every row matching ``match``.

        Returns:
            Number of rows deleted
        """
        rows = self._rows(table)
        kept = [r for r in rows if not _matches(r, match)]
        deleted = len(rows) - len(kept)
        self._tables[table] = kept
        return deleted
