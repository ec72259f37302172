"""Submit thread use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from feedback.config import ContentSettings
from feedback.domain.error import ValidationError
from feedback.domain.service import ThreadService
from feedback.domain.value import ThreadStatus


class SubmitThreadRequest(BaseModel):
    """Submit thread request."""

    content: str
    rating: int
    image_url: str | None = None  # URL returned by the image upload


class SubmitThreadResponse(BaseModel):
    """Submit thread response."""

    thread_id: str
    content: str
    rating: int
    anonymous_id: str
    status: ThreadStatus
    image_url: str | None
    created_at: datetime


class SubmitThreadUseCase:
    """Use case for posting a new feedback thread."""

    def __init__(
        self, thread_service: ThreadService, content_settings: ContentSettings
    ) -> None:
        """Initialize submit thread use case.

        Args:
            thread_service: Thread domain service
            content_settings: Length caps for the submission form
        """
        self.thread_service = thread_service
        self.content_settings = content_settings

    async def execute(self, request: SubmitThreadRequest) -> SubmitThreadResponse:
        """Execute submit thread flow.

        The form cap on content length is applied here; emptiness and the
        rating range are checked by the thread service.

        Raises:
            ValidationError: If content is blank, too long, or rating is out of range
        """
        limit = self.content_settings.thread_max_length
        if len(request.content.strip()) > limit:
            logfire.warn(
                "Thread content too long", length=len(request.content), limit=limit
            )
            raise ValidationError(f"Thread content must be at most {limit} characters")

        thread = await self.thread_service.submit_thread(
            content=request.content,
            rating=request.rating,
            image_url=request.image_url,
        )

        return SubmitThreadResponse(
            thread_id=str(thread.id),
            content=thread.content,
            rating=thread.rating,
            anonymous_id=thread.anonymous_id.root,
            status=thread.status,
            image_url=thread.image_url,
            created_at=thread.created_at,
        )
