"""Domain services."""

from .admin_identity_service import AdminIdentityService
from .base import Service
from .identity_service import (
    IdentityService,
    IdentityStorage,
    InMemoryIdentityStorage,
)
from .moderation_service import ModerationService
from .news_service import NewsService
from .reaction_service import ReactionService
from .reply_service import ReplyService
from .thread_service import ThreadService
from .warning_service import WarningService, select_effective_warning

__all__ = [
    "AdminIdentityService",
    "IdentityService",
    "IdentityStorage",
    "InMemoryIdentityStorage",
    "ModerationService",
    "NewsService",
    "ReactionService",
    "ReplyService",
    "Service",
    "ThreadService",
    "WarningService",
    "select_effective_warning",
]
