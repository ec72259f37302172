"""Reply use cases."""

from .list_replies import ListRepliesRequest, ListRepliesResponse, ListRepliesUseCase
from .submit_reply import SubmitReplyRequest, SubmitReplyUseCase

__all__ = [
    "ListRepliesRequest",
    "ListRepliesResponse",
    "ListRepliesUseCase",
    "SubmitReplyRequest",
    "SubmitReplyUseCase",
]
