"""In-memory repository implementations for testing."""

from .news import InMemoryNewsRepository
from .reaction import InMemoryReactionRepository
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository
from .warning import InMemoryWarningRepository

__all__ = [
    "InMemoryNewsRepository",
    "InMemoryReactionRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
    "InMemoryWarningRepository",
]
