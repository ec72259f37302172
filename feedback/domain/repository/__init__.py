"""Repository interfaces for Feedback Hub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from feedback.domain.repository.news import NewsRepository
from feedback.domain.repository.reaction import ReactionRepository
from feedback.domain.repository.reply import ReplyRepository
from feedback.domain.repository.thread import ThreadRepository
from feedback.domain.repository.warning import WarningRepository

__all__ = [
    "ThreadRepository",
    "ReplyRepository",
    "ReactionRepository",
    "WarningRepository",
    "NewsRepository",
]
