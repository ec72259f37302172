"""Live board wiring: the active-thread feed as a change subscriber."""

from dishka import AsyncContainer

from feedback.application.feed import ActiveThreadFeed
from feedback.application.usecase.thread import (
    ListActiveThreadsRequest,
    ListActiveThreadsUseCase,
)
from feedback.application.usecase.view import ThreadListItem
from feedback.domain.event import ThreadChangeNotifier

# Newest threads kept in the live snapshot (the listing page maximum)
LIVE_BOARD_SIZE = 100

ThreadFeed = ActiveThreadFeed[ThreadListItem]


async def start_thread_feed(container: AsyncContainer) -> ThreadFeed:
    """Subscribe a board feed to thread changes and load its first snapshot.

    Each refresh runs the public listing in its own request scope, after
    the write that triggered it has been committed.

    Args:
        container: Application-scope DI container
    """

    async def fetch_board() -> list[ThreadListItem]:
        async with container() as request_container:
            use_case = await request_container.get(ListActiveThreadsUseCase)
            response = await use_case.execute(
                ListActiveThreadsRequest(limit=LIVE_BOARD_SIZE)
            )
            return response.threads

    notifier = await container.get(ThreadChangeNotifier)
    feed: ThreadFeed = ActiveThreadFeed(notifier, fetch_board)
    await feed.start()
    return feed
