"""News repository interface."""

from abc import ABC, abstractmethod
from typing import List

from feedback.domain.model.news import News


class NewsRepository(ABC):
    """Repository for News entity."""

    @abstractmethod
    async def find_active(self) -> List[News]:
        """Find news items flagged active, ordered by display_order ascending.

        Expiry is evaluated by the caller.

        Returns:
            List of active news items
        """
        pass

    @abstractmethod
    async def save(self, news: News) -> News:
        """Insert a news item.

        Args:
            news: The news item to save

        Returns:
            The saved news item
        """
        pass
