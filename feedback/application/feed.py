"""Live listing of active threads driven by change notifications."""

from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import logfire

from feedback.domain.event import ThreadChange, ThreadChangeNotifier

T = TypeVar("T")


class ActiveThreadFeed(Generic[T]):
    """Keeps a snapshot of the board and re-fetches it on every thread change.

    Each refresh replaces the snapshot with a fresh fetch, so duplicate or
    reordered notifications only cause extra fetches, never duplicate rows.
    A failing fetch keeps the previous snapshot.
    """

    def __init__(
        self, notifier: ThreadChangeNotifier, fetch: Callable[[], Awaitable[list[T]]]
    ) -> None:
        """Initialize feed.

        Args:
            notifier: Source of thread change events
            fetch: Coroutine returning the current active-thread listing
        """
        self.notifier = notifier
        self.fetch = fetch
        self.snapshot: list[T] = []
        self.refresh_count = 0
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def is_running(self) -> bool:
        return self._unsubscribe is not None

    async def start(self) -> list[T]:
        """Load the initial snapshot and subscribe to changes."""
        if self._unsubscribe is None:
            self._unsubscribe = self.notifier.subscribe(self._on_change)
        return await self.refresh()

    def stop(self) -> None:
        """Stop listening for changes; the snapshot is kept."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def refresh(self) -> list[T]:
        """Replace the snapshot with a fresh listing."""
        with logfire.span("active_thread_feed.refresh"):
            self.snapshot = list(await self.fetch())
            self.refresh_count += 1
            logfire.debug("Feed refreshed", count=len(self.snapshot))
            return self.snapshot

    async def _on_change(self, change: ThreadChange) -> None:
        logfire.debug(
            "Thread change received",
            kind=change.kind.value,
            thread_id=str(change.thread_id),
        )
        await self.refresh()
