"""Archive and delete thread use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from feedback.domain.model import Thread
from feedback.domain.service import ModerationService
from feedback.domain.value import AdminId, ThreadId, ThreadStatus


class ModerateThreadRequest(BaseModel):
    """Request to move a thread through moderation."""

    thread_id: str  # UUID string
    admin_id: str  # Resolved from the admin token


class ModerateThreadResponse(BaseModel):
    """Thread state after a moderation action."""

    thread_id: str
    status: ThreadStatus
    updated_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ModerateThreadResponse":
        return cls(
            thread_id=str(thread.id), status=thread.status, updated_at=thread.updated_at
        )


class ArchiveThreadUseCase:
    """Use case for hiding a thread from the public board.

    Repeating the call on an archived thread succeeds without changes.
    """

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateThreadRequest) -> ModerateThreadResponse:
        """Execute archive flow.

        Raises:
            NotFoundError: If the thread does not exist
            InvalidStatusTransitionError: If the thread is already deleted
        """
        thread = await self.moderation_service.archive(
            ThreadId(UUID(request.thread_id)), AdminId(UUID(request.admin_id))
        )
        return ModerateThreadResponse.from_thread(thread)


class DeleteThreadUseCase:
    """Use case for tombstoning a thread."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateThreadRequest) -> ModerateThreadResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.moderation_service.remove(
            ThreadId(UUID(request.thread_id)), AdminId(UUID(request.admin_id))
        )
        return ModerateThreadResponse.from_thread(thread)
