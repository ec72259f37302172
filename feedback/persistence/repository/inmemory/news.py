"""In-memory news repository for testing."""

from feedback.domain.model.news import News
from feedback.domain.repository.news import NewsRepository
from feedback.persistence.mappers import news_to_dict, row_to_news
from feedback.persistence.memory import InMemoryStore
from feedback.persistence.tables import news_table

TABLE = news_table.name


class InMemoryNewsRepository(NewsRepository):
    """In-memory implementation of NewsRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_active(self) -> list[News]:
        """Find news items flagged active, by display_order."""
        rows = await self.store.query(
            TABLE, {"is_active": True}, order_by="display_order"
        )
        return [row_to_news(row) for row in rows]

    async def save(self, news: News) -> News:
        """Insert a news item."""
        await self.store.insert(TABLE, news_to_dict(news))
        return news
