"""Thread domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from feedback.domain.error import (
    InvalidStatusTransitionError,
    NotFoundError,
    ValidationError,
)
from feedback.domain.event import ThreadChange, ThreadChangeKind, ThreadChangeOutbox
from feedback.domain.model.thread import Thread
from feedback.domain.repository import ThreadRepository
from feedback.domain.value import ThreadId, ThreadStatus

from .base import Service
from .identity_service import IdentityService

MIN_RATING = 1
MAX_RATING = 5


class ThreadService(Service):
    """Domain service for thread submission and the moderation state machine."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        identity_service: IdentityService,
        outbox: ThreadChangeOutbox,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            identity_service: Anonymous identity service (author tokens)
            outbox: Collects thread changes for publication after commit
        """
        self.thread_repository = thread_repository
        self.identity_service = identity_service
        self.outbox = outbox

    async def submit_thread(
        self, content: str, rating: int, image_url: str | None = None
    ) -> Thread:
        """Submit a new feedback thread under a fresh anonymous identity.

        Args:
            content: Feedback text (surrounding whitespace is trimmed)
            rating: Star rating from 1 to 5
            image_url: URL of an already stored image attachment

        Returns:
            The saved thread, status ACTIVE

        Raises:
            ValidationError: If content is blank or rating is out of range
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Thread content must not be empty")
        if (
            isinstance(rating, bool)
            or not isinstance(rating, int)
            or not MIN_RATING <= rating <= MAX_RATING
        ):
            raise ValidationError(
                f"Rating must be an integer from {MIN_RATING} to {MAX_RATING}"
            )

        with logfire.span("thread_service.submit_thread", rating=rating):
            now = datetime.now()
            thread = Thread(
                id=ThreadId(uuid4()),
                content=text,
                rating=rating,
                anonymous_id=self.identity_service.new_submission_identity(),
                status=ThreadStatus.ACTIVE,
                image_url=image_url,
                created_at=now,
                updated_at=now,
            )

            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread submitted",
                thread_id=str(saved.id),
                anonymous_id=saved.anonymous_id.root,
                has_image=saved.image_url is not None,
            )

            self.outbox.add(
                ThreadChange(
                    kind=ThreadChangeKind.INSERTED,
                    thread_id=saved.id,
                    status=saved.status,
                )
            )
            return saved

    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread | None:
        """Get a thread by ID, whatever its status.

        Args:
            thread_id: Thread ID

        Returns:
            Thread if found, None otherwise
        """
        with logfire.span("thread_service.get_thread_by_id", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
            return thread

    async def require_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID or fail.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.get_thread_by_id(thread_id)
        if not thread:
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def require_visible_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread that is on the public board or fail.

        Archived and deleted threads are reported as missing, so public
        callers cannot read or interact with them.

        Raises:
            NotFoundError: If the thread does not exist or is not ACTIVE
        """
        thread = await self.require_thread(thread_id)
        if not thread.is_visible:
            logfire.info(
                "Hidden thread requested",
                thread_id=str(thread_id),
                status=thread.status.value,
            )
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def list_active_threads(
        self, limit: int | None = None, offset: int = 0
    ) -> list[Thread]:
        """List threads visible on the public board, newest first.

        Args:
            limit: Maximum number of threads (None for all)
            offset: Number of threads to skip

        Returns:
            Active threads
        """
        with logfire.span(
            "thread_service.list_active_threads", limit=limit, offset=offset
        ):
            threads = await self.thread_repository.find_all(
                status=ThreadStatus.ACTIVE, limit=limit, offset=offset
            )
            logfire.info("Active threads listed", count=len(threads))
            return threads

    async def count_active_threads(self) -> int:
        """Count threads visible on the public board."""
        return await self.thread_repository.count(status=ThreadStatus.ACTIVE)

    async def list_all_threads(self) -> list[Thread]:
        """List every thread including archived and deleted ones, newest first."""
        with logfire.span("thread_service.list_all_threads"):
            threads = await self.thread_repository.find_all(status=None)
            logfire.info("All threads listed", count=len(threads))
            return threads

    async def set_status(self, thread_id: ThreadId, status: ThreadStatus) -> Thread:
        """Move a thread through the moderation state machine.

        Allowed: active -> archived, active -> deleted, archived -> deleted.
        Requesting the current status is a no-op, so repeating an archive
        or delete is safe. Nothing ever returns to active.

        Args:
            thread_id: Thread ID
            status: Requested status

        Returns:
            The thread in its resulting state

        Raises:
            NotFoundError: If the thread does not exist
            InvalidStatusTransitionError: If the transition is not allowed
        """
        with logfire.span(
            "thread_service.set_status",
            thread_id=str(thread_id),
            status=status.value,
        ):
            thread = await self.require_thread(thread_id)

            if thread.status == status:
                logfire.info(
                    "Thread already in requested status",
                    thread_id=str(thread_id),
                    status=status.value,
                )
                return thread

            if not thread.status.can_transition_to(status):
                logfire.warn(
                    "Rejected thread status transition",
                    thread_id=str(thread_id),
                    current=thread.status.value,
                    requested=status.value,
                )
                raise InvalidStatusTransitionError(
                    str(thread_id), thread.status.value, status.value
                )

            updated = await self.thread_repository.update_status(
                thread_id, status, datetime.now()
            )
            if not updated:
                raise NotFoundError("Thread", str(thread_id))

            logfire.info(
                "Thread status changed",
                thread_id=str(thread_id),
                previous=thread.status.value,
                status=updated.status.value,
            )

            self.outbox.add(
                ThreadChange(
                    kind=ThreadChangeKind.UPDATED,
                    thread_id=updated.id,
                    status=updated.status,
                )
            )
            return updated
