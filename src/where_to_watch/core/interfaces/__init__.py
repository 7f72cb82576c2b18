"""Core interfaces for dependency injection."""

from .availability_service import IAvailabilityService
from .history_store import IHistoryStore
from .tmdb_service import ITMDbService

__all__ = [
    "IAvailabilityService",
    "IHistoryStore",
    "ITMDbService",
]
