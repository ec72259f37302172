"""Thread change notification.

The content store records a ``ThreadChange`` whenever a thread is inserted
or its status changes; the request's ``ThreadChangeOutbox`` publishes it once
the write is committed. Listeners (for example the active-thread listing)
treat every event as a signal to re-fetch; they must not rely on delivery
order relative to the write that triggered it, nor on exactly-once delivery.
"""

import sys
from collections.abc import Awaitable, Callable
from enum import Enum

import logfire

from feedback.domain.value import ThreadId, ThreadStatus
from feedback.domain.value.common import ValueObject


class ThreadChangeKind(str, Enum):
    """What happened to the thread."""

    INSERTED = "inserted"
    UPDATED = "updated"


class ThreadChange(ValueObject):
    """A single change event on the thread table."""

    kind: ThreadChangeKind
    thread_id: ThreadId
    status: ThreadStatus


ThreadChangeListener = Callable[[ThreadChange], Awaitable[None]]


class ThreadChangeNotifier:
    """In-process publish/subscribe hub for thread changes.

    Publishing is fire-and-forget from the writer's point of view: a failing
    listener is logged and skipped, and never fails the write that caused
    the event.
    """

    def __init__(self) -> None:
        self._listeners: list[ThreadChangeListener] = []

    @property
    def listener_count(self) -> int:
        """Number of currently subscribed listeners."""
        return len(self._listeners)

    def subscribe(self, listener: ThreadChangeListener) -> Callable[[], None]:
        """Register a listener.

        Args:
            listener: Coroutine function called with each change

        Returns:
            Callable that removes the listener again (safe to call twice)
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def publish(self, change: ThreadChange) -> None:
        """Deliver a change to every listener subscribed at call time.

        Args:
            change: The change event
        """
        with logfire.span(
            "thread_change.publish",
            kind=change.kind.value,
            thread_id=str(change.thread_id),
            listeners=len(self._listeners),
        ):
            for listener in list(self._listeners):
                try:
                    await listener(change)
                except Exception as e:
                    logfire.error(
                        "Thread change listener failed",
                        thread_id=str(change.thread_id),
                        error=str(e),
                        error_type=type(e).__name__,
                        _exc_info=sys.exc_info(),
                    )


class ThreadChangeOutbox:
    """Holds one request's thread changes until its writes are durable.

    The content store records changes here instead of publishing them
    directly. ``flush`` hands them to the notifier once the request's
    transaction has committed; ``discard`` drops them when it rolls back,
    so listeners never re-fetch state that is not yet (or never) visible.
    """

    def __init__(self, notifier: ThreadChangeNotifier) -> None:
        self.notifier = notifier
        self._pending: list[ThreadChange] = []

    @property
    def pending(self) -> tuple[ThreadChange, ...]:
        """Changes recorded and not yet published."""
        return tuple(self._pending)

    def add(self, change: ThreadChange) -> None:
        """Record a change for publication after commit."""
        self._pending.append(change)

    def discard(self) -> None:
        """Drop every recorded change."""
        if self._pending:
            logfire.debug("Thread changes discarded", count=len(self._pending))
        self._pending.clear()

    async def flush(self) -> None:
        """Publish recorded changes in order and clear them."""
        pending, self._pending = self._pending, []
        for change in pending:
            await self.notifier.publish(change)
