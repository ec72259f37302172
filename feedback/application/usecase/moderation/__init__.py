"""Moderation use cases."""

from .admin_reply import AdminReplyRequest, AdminReplyUseCase
from .change_status import (
    ArchiveThreadUseCase,
    DeleteThreadUseCase,
    ModerateThreadRequest,
    ModerateThreadResponse,
)
from .list_warnings import ListWarningsResponse, ListWarningsUseCase
from .warn_user import WarnUserRequest, WarnUserResponse, WarnUserUseCase

__all__ = [
    "AdminReplyRequest",
    "AdminReplyUseCase",
    "ArchiveThreadUseCase",
    "DeleteThreadUseCase",
    "ListWarningsResponse",
    "ListWarningsUseCase",
    "ModerateThreadRequest",
    "ModerateThreadResponse",
    "WarnUserRequest",
    "WarnUserResponse",
    "WarnUserUseCase",
]
