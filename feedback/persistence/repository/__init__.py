"""PostgreSQL repository implementations."""

from feedback.persistence.repository.news import PostgresNewsRepository
from feedback.persistence.repository.reaction import PostgresReactionRepository
from feedback.persistence.repository.reply import PostgresReplyRepository
from feedback.persistence.repository.thread import PostgresThreadRepository
from feedback.persistence.repository.warning import PostgresWarningRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresReplyRepository",
    "PostgresReactionRepository",
    "PostgresWarningRepository",
    "PostgresNewsRepository",
]
