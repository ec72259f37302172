"""Unit tests for ActiveThreadFeed."""

import pytest

from feedback.application.feed import ActiveThreadFeed
from feedback.domain.event import ThreadChangeNotifier, ThreadChangeOutbox
from feedback.domain.model import Thread
from feedback.domain.service import ModerationService, ThreadService
from tests.conftest import ADMIN_ID
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestActiveThreadFeed:
    """Tests for the notification-driven board snapshot."""

    @pytest.mark.asyncio
    async def test_feed_follows_submit_and_archive(self, unit_env):
        """The snapshot tracks inserts and status changes."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        moderation_service = await unit_env.get(ModerationService)
        notifier = await unit_env.get(ThreadChangeNotifier)
        outbox = await unit_env.get(ThreadChangeOutbox)
        feed: ActiveThreadFeed[Thread] = ActiveThreadFeed(
            notifier, thread_service.list_active_threads
        )
        await feed.start()
        assert feed.snapshot == []

        # Act
        thread = await thread_service.submit_thread("Live update", 4)
        await outbox.flush()
        after_submit = [t.id for t in feed.snapshot]
        await moderation_service.archive(thread.id, ADMIN_ID)
        await outbox.flush()

        # Assert
        assert after_submit == [thread.id]
        assert feed.snapshot == []

    @pytest.mark.asyncio
    async def test_start_twice_subscribes_once(self, unit_env):
        """Restarting a running feed does not double the refreshes."""
        thread_service = await unit_env.get(ThreadService)
        notifier = await unit_env.get(ThreadChangeNotifier)
        outbox = await unit_env.get(ThreadChangeOutbox)
        feed = ActiveThreadFeed(notifier, thread_service.list_active_threads)

        await feed.start()
        await feed.start()
        refreshes = feed.refresh_count
        await thread_service.submit_thread("Once", 3)
        await outbox.flush()

        assert notifier.listener_count == 1
        assert feed.refresh_count == refreshes + 1

    @pytest.mark.asyncio
    async def test_stop_keeps_snapshot(self, unit_env):
        """A stopped feed ignores changes but keeps its last listing."""
        thread_service = await unit_env.get(ThreadService)
        notifier = await unit_env.get(ThreadChangeNotifier)
        outbox = await unit_env.get(ThreadChangeOutbox)
        first = await thread_service.submit_thread("Before stop", 3)
        feed = ActiveThreadFeed(notifier, thread_service.list_active_threads)
        await feed.start()

        feed.stop()
        await thread_service.submit_thread("After stop", 3)
        await outbox.flush()

        assert not feed.is_running
        assert [t.id for t in feed.snapshot] == [first.id]

    @pytest.mark.asyncio
    async def test_duplicate_notifications_do_not_duplicate_rows(self):
        """Each refresh replaces the snapshot."""
        notifier = ThreadChangeNotifier()
        rows = ["a", "b"]

        async def fetch():
            return rows

        feed = ActiveThreadFeed(notifier, fetch)
        await feed.start()
        await feed.refresh()
        await feed.refresh()

        assert feed.snapshot == ["a", "b"]
        assert feed.refresh_count == 3

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_snapshot(self):
        """A fetch error leaves the last good listing in place."""
        notifier = ThreadChangeNotifier()
        calls = 0

        async def fetch():
            nonlocal calls
            calls += 1
            if calls > 1:
                raise RuntimeError("database unavailable")
            return ["a"]

        feed = ActiveThreadFeed(notifier, fetch)
        await feed.start()

        with pytest.raises(RuntimeError):
            await feed.refresh()

        assert feed.snapshot == ["a"]
