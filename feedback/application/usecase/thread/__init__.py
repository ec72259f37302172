"""Thread use cases."""

from .list_active_threads import (
    ListActiveThreadsRequest,
    ListActiveThreadsResponse,
    ListActiveThreadsUseCase,
)
from .list_all_threads import (
    AuditThreadItem,
    ListAllThreadsResponse,
    ListAllThreadsUseCase,
)
from .submit_thread import (
    SubmitThreadRequest,
    SubmitThreadResponse,
    SubmitThreadUseCase,
)
from .upload_image import UploadImageRequest, UploadImageResponse, UploadImageUseCase

__all__ = [
    "AuditThreadItem",
    "ListActiveThreadsRequest",
    "ListActiveThreadsResponse",
    "ListActiveThreadsUseCase",
    "ListAllThreadsResponse",
    "ListAllThreadsUseCase",
    "SubmitThreadRequest",
    "SubmitThreadResponse",
    "SubmitThreadUseCase",
    "UploadImageRequest",
    "UploadImageResponse",
    "UploadImageUseCase",
]
