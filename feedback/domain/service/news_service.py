"""News domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from feedback.domain.error import ValidationError
from feedback.domain.model.news import News
from feedback.domain.repository import NewsRepository
from feedback.domain.value import NewsId

from .base import Service


class NewsService(Service):
    """Domain service for the announcement bar."""

    def __init__(self, news_repository: NewsRepository) -> None:
        """Initialize news service.

        Args:
            news_repository: News repository
        """
        self.news_repository = news_repository

    async def list_active_news(self, now: datetime | None = None) -> list[News]:
        """List news that is active and not expired, by display order.

        Args:
            now: Reference time for expiry (defaults to the current time)

        Returns:
            Live news items
        """
        reference = now or datetime.now()
        with logfire.span("news_service.list_active_news"):
            items = await self.news_repository.find_active()
            live = [item for item in items if item.is_live(reference)]
            logfire.info("Active news listed", count=len(live))
            return live

    async def publish_news(
        self,
        title: str,
        content: str,
        display_order: int = 0,
        expires_at: datetime | None = None,
    ) -> News:
        """Publish a news item.

        Raises:
            ValidationError: If title or content is blank
        """
        title_text = (title or "").strip()
        content_text = (content or "").strip()
        if not title_text or not content_text:
            raise ValidationError("News title and content must not be empty")

        with logfire.span("news_service.publish_news", display_order=display_order):
            news = News(
                id=NewsId(uuid4()),
                title=title_text,
                content=content_text,
                display_order=display_order,
                is_active=True,
                expires_at=expires_at,
                created_at=datetime.now(),
            )
            saved = await self.news_repository.save(news)
            logfire.info("News published", news_id=str(saved.id))
            return saved
