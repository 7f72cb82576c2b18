"""JSON file backed history store."""

import asyncio
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiofiles

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import HistoryStoreError
from ..interfaces import IHistoryStore
from ..models import SearchHistoryItem

SEARCHES_KEY = "searchHistory"
VISITS_KEY = "visitedMovies"


class JsonHistoryStore(IHistoryStore, LoggerMixin):
    """Keeps recent searches and last-visit times in a local JSON file.

    File layout::

        {
          "searchHistory": [{"query": "dune", "timestamp": "2024-03-01T12:00:00+00:00"}],
          "visitedMovies": {"438631": "2024-03-01T12:05:00+00:00"}
        }
    """

    def __init__(self, config: Config) -> None:
        """Initialize history store.

        Args:
            config: Application configuration.
        """
        self._history_config = config.history
        self._path = Path(self._history_config.path)
        self._lock = asyncio.Lock()

    @property
    def enabled(self) -> bool:
        """Whether history is recorded."""
        return self._history_config.enabled

    async def record_search(self, query: str) -> None:
        """Remember a search, most recent first.

        Repeating a search moves it to the front instead of duplicating it.
        """
        query = query.strip()
        if not self.enabled or not query:
            return

        async with self._lock:
            data = await self._load()
            searches = [
                item
                for item in data[SEARCHES_KEY]
                if str(item.get("query", "")).lower() != query.lower()
            ]
            searches.insert(0, {"query": query, "timestamp": _now().isoformat()})
            data[SEARCHES_KEY] = searches[: self._history_config.max_searches]
            await self._save(data)

    async def recent_searches(self, limit: Optional[int] = None) -> List[SearchHistoryItem]:
        """Get recent searches, most recent first."""
        if not self.enabled:
            return []

        limit = limit or self._history_config.display_limit
        data = await self._load()

        items = []
        for raw in data[SEARCHES_KEY]:
            try:
                items.append(SearchHistoryItem(**raw))
            except (TypeError, ValueError):
                self.logger.debug(f"Skipping malformed history entry: {raw!r}")
        return items[:limit]

    async def touch_visit(self, movie_id: int) -> Optional[datetime]:
        """Record a visit to a movie.

        Returns:
            Time of the previous visit, or None on the first visit.
        """
        if not self.enabled:
            return None

        async with self._lock:
            data = await self._load()
            previous = _parse_timestamp(data[VISITS_KEY].get(str(movie_id)))
            data[VISITS_KEY][str(movie_id)] = _now().isoformat()
            await self._save(data)
        return previous

    async def last_visited(self, movie_id: int) -> Optional[datetime]:
        """Get the time of the last visit to a movie."""
        if not self.enabled:
            return None
        data = await self._load()
        return _parse_timestamp(data[VISITS_KEY].get(str(movie_id)))

    async def _load(self) -> Dict[str, Any]:
        """Load history, starting empty when the file is missing or corrupt."""
        empty: Dict[str, Any] = {SEARCHES_KEY: [], VISITS_KEY: {}}
        if not self._path.exists():
            return empty

        try:
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                content = await f.read()
        except OSError as e:
            raise HistoryStoreError(f"Failed to read history file {self._path}: {e}") from e

        try:
            data = json.loads(content) if content.strip() else {}
        except json.JSONDecodeError as e:
            self.logger.warning(f"Ignoring corrupt history file {self._path}: {e}")
            return empty

        if not isinstance(data, dict):
            self.logger.warning(f"Ignoring history file with unexpected layout: {self._path}")
            return empty

        searches = data.get(SEARCHES_KEY)
        visits = data.get(VISITS_KEY)
        return {
            SEARCHES_KEY: [s for s in searches if isinstance(s, dict)]
            if isinstance(searches, list)
            else [],
            VISITS_KEY: visits if isinstance(visits, dict) else {},
        }

    async def _save(self, data: Dict[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self._path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(data, indent=2))
        except OSError as e:
            error_msg = f"Failed to write history file {self._path}: {e}"
            self.logger.error(error_msg)
            raise HistoryStoreError(error_msg) from e


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
