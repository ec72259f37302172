"""News use cases."""

from datetime import datetime

from pydantic import BaseModel

from feedback.domain.model import News
from feedback.domain.service import NewsService


class NewsItem(BaseModel):
    """News item in response."""

    news_id: str
    title: str
    content: str
    display_order: int
    expires_at: datetime | None
    created_at: datetime

    @classmethod
    def from_news(cls, news: News) -> "NewsItem":
        return cls(
            news_id=str(news.id),
            title=news.title,
            content=news.content,
            display_order=news.display_order,
            expires_at=news.expires_at,
            created_at=news.created_at,
        )


class ListNewsResponse(BaseModel):
    """List news response."""

    news: list[NewsItem]


class ListNewsUseCase:
    """Use case for the announcement bar above the board."""

    def __init__(self, news_service: NewsService) -> None:
        self.news_service = news_service

    async def execute(self) -> ListNewsResponse:
        """Active, unexpired news by display order."""
        items = await self.news_service.list_active_news()
        return ListNewsResponse(news=[NewsItem.from_news(n) for n in items])


class PublishNewsRequest(BaseModel):
    """Publish news request."""

    title: str
    content: str
    display_order: int = 0
    expires_at: datetime | None = None


class PublishNewsUseCase:
    """Use case for the moderator publishing an announcement."""

    def __init__(self, news_service: NewsService) -> None:
        self.news_service = news_service

    async def execute(self, request: PublishNewsRequest) -> NewsItem:
        """Execute publish news flow.

        Raises:
            ValidationError: If title or content is blank
        """
        news = await self.news_service.publish_news(
            title=request.title,
            content=request.content,
            display_order=request.display_order,
            expires_at=request.expires_at,
        )
        return NewsItem.from_news(news)
