"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from feedback.domain.model import ModerationWarning, Reply
from feedback.domain.value import ReactionType, ThreadStatus, WarningLevel


class WarningBadge(BaseModel):
    """Effective warning shown next to an author tag."""

    level: WarningLevel
    reason: str
    created_at: datetime

    @classmethod
    def from_warning(cls, warning: ModerationWarning | None) -> "WarningBadge | None":
        if warning is None:
            return None
        return cls(
            level=warning.warning_level,
            reason=warning.reason,
            created_at=warning.created_at,
        )


class WarningItem(BaseModel):
    """Full warning record (admin views)."""

    warning_id: str
    anonymous_id: str
    level: WarningLevel
    reason: str
    thread_id: str | None
    reply_id: str | None
    admin_id: str
    created_at: datetime

    @classmethod
    def from_warning(cls, warning: ModerationWarning) -> "WarningItem":
        return cls(
            warning_id=str(warning.id),
            anonymous_id=warning.anonymous_id.root,
            level=warning.warning_level,
            reason=warning.reason,
            thread_id=str(warning.thread_id) if warning.thread_id else None,
            reply_id=str(warning.reply_id) if warning.reply_id else None,
            admin_id=str(warning.admin_id),
            created_at=warning.created_at,
        )


class ReplyItem(BaseModel):
    """Reply in a listing.

    ``anonymous_id`` is None for moderator replies, which are shown as "Admin".
    """

    reply_id: str
    thread_id: str
    content: str
    is_admin: bool
    anonymous_id: str | None
    author_warning: WarningBadge | None = None
    created_at: datetime

    @classmethod
    def from_reply(
        cls, reply: Reply, author_warning: ModerationWarning | None = None
    ) -> "ReplyItem":
        return cls(
            reply_id=str(reply.id),
            thread_id=str(reply.thread_id),
            content=reply.content,
            is_admin=reply.is_admin_reply,
            anonymous_id=reply.anonymous_id.root if reply.anonymous_id else None,
            author_warning=WarningBadge.from_warning(author_warning),
            created_at=reply.created_at,
        )


class ThreadSummary(BaseModel):
    """Thread fields common to the public and admin listings."""

    thread_id: str
    content: str
    rating: int
    anonymous_id: str
    status: ThreadStatus
    image_url: str | None
    created_at: datetime
    updated_at: datetime
    likes: int = 0
    dislikes: int = 0
    author_warning: WarningBadge | None = None


class ThreadListItem(ThreadSummary):
    """Thread on the public board."""

    reply_count: int = 0
    my_reaction: ReactionType | None = None
