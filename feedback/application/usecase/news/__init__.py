"""News use cases."""

from .list_news import (
    ListNewsResponse,
    ListNewsUseCase,
    NewsItem,
    PublishNewsRequest,
    PublishNewsUseCase,
)

__all__ = [
    "ListNewsResponse",
    "ListNewsUseCase",
    "NewsItem",
    "PublishNewsRequest",
    "PublishNewsUseCase",
]
