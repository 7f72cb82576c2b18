"""History store interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models import SearchHistoryItem


class IHistoryStore(ABC):
    """Interface for local search and visit history."""

    @abstractmethod
    async def record_search(self, query: str) -> None:
        """Remember a search, most recent first."""
        pass

    @abstractmethod
    async def recent_searches(self, limit: Optional[int] = None) -> List[SearchHistoryItem]:
        """Get recent searches, most recent first."""
        pass

    @abstractmethod
    async def touch_visit(self, movie_id: int) -> Optional[datetime]:
        """Record a visit to a movie.

        Returns:
            Time of the previous visit, or None on the first visit.
        """
        pass

    @abstractmethod
    async def last_visited(self, movie_id: int) -> Optional[datetime]:
        """Get the time of the last visit to a movie."""
        pass
