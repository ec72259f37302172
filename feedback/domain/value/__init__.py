"""Domain value objects for Feedback Hub."""

from feedback.domain.value.identifiers import (
    AdminId,
    NewsId,
    ReactionId,
    ReplyId,
    ThreadId,
    WarningId,
)
from feedback.domain.value.types import (
    AdminAuthor,
    AnonymousAuthor,
    AnonymousId,
    Author,
    ReactionCounts,
    ReactionType,
    ThreadStatus,
    WarningLevel,
)

__all__ = [
    # Identifiers
    "ThreadId",
    "ReplyId",
    "ReactionId",
    "WarningId",
    "NewsId",
    "AdminId",
    # Types
    "AnonymousId",
    "Author",
    "AnonymousAuthor",
    "AdminAuthor",
    "ThreadStatus",
    "ReactionType",
    "ReactionCounts",
    "WarningLevel",
]
