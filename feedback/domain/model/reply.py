"""Reply entity."""

from datetime import datetime

from pydantic import Field

from feedback.domain.model.common import DomainModel
from feedback.domain.value import AdminAuthor, AnonymousId, Author, ReplyId, ThreadId


class Reply(DomainModel):
    """Reply entity.

    A reply belongs to one thread and has exactly one author, either an
    anonymous visitor or the moderator.
    """

    id: ReplyId
    thread_id: ThreadId
    content: str = Field(min_length=1)
    author: Author
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin_reply(self) -> bool:
        """Whether the moderator wrote this reply."""
        return isinstance(self.author, AdminAuthor)

    @property
    def anonymous_id(self) -> AnonymousId | None:
        """Anonymous author token, None for moderator replies."""
        if self.is_admin_reply:
            return None
        return self.author.anonymous_id  # type: ignore[union-attr]
