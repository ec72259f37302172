"""News item shown in the announcement bar above the board."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from feedback.domain.model.common import DomainModel
from feedback.domain.value import NewsId


class News(DomainModel):
    """Announcement published by the moderator."""

    id: NewsId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    display_order: int = 0
    is_active: bool = True
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    def is_live(self, now: datetime) -> bool:
        """Whether the item should be displayed at ``now``."""
        return self.is_active and (self.expires_at is None or self.expires_at > now)
