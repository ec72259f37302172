"""PostgreSQL implementation of News repository."""

from typing import List

import logfire
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback.domain.model import News
from feedback.domain.repository.news import NewsRepository
from feedback.persistence.error import storage_errors
from feedback.persistence.mappers import news_to_dict, row_to_news
from feedback.persistence.tables import news_table


class PostgresNewsRepository(NewsRepository):
    """PostgreSQL implementation of NewsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_active(self) -> List[News]:
        """Find news items flagged active, by display_order."""
        stmt = (
            select(news_table)
            .where(news_table.c.is_active.is_(True))
            .order_by(news_table.c.display_order, news_table.c.created_at)
        )
        with storage_errors("news.find_active"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        return [row_to_news(row._asdict()) for row in rows]

    async def save(self, news: News) -> News:
        """Insert a news item."""
        with logfire.span("news_repository.save", news_id=str(news.id)):
            with storage_errors("news.insert"):
                stmt = insert(news_table).values(**news_to_dict(news))
                await self.session.execute(stmt)
                await self.session.flush()
            return news
