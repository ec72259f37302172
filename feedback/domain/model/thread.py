"""Thread aggregate root.

A thread is a rated piece of anonymous feedback. Threads are never removed
from storage: deletion is a status change that hides the thread from the
public board while keeping it for moderator audit.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from feedback.domain.model.common import DomainModel
from feedback.domain.value import AnonymousId, ThreadId, ThreadStatus


class Thread(DomainModel):
    """Thread aggregate root.

    Business rules:
    - Content is non-empty (length caps belong to the submission path)
    - Rating is an integer from 1 to 5
    - Status only moves away from ACTIVE, never back to it
    """

    id: ThreadId
    content: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    anonymous_id: AnonymousId
    status: ThreadStatus = ThreadStatus.ACTIVE
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_visible(self) -> bool:
        """Whether the thread shows up on the public board."""
        return self.status == ThreadStatus.ACTIVE
