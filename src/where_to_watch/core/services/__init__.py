"""Core service implementations."""

from .availability_service import AvailabilityService
from .history_store import JsonHistoryStore
from .tmdb_service import TMDbService

__all__ = [
    "AvailabilityService",
    "JsonHistoryStore",
    "TMDbService",
]
