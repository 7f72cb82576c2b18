"""Utility functions and classes."""

from .date_utils import format_long_date, format_time_ago, parse_date
from .exceptions import (
    AvailabilityError,
    ConfigurationError,
    HistoryStoreError,
    MovieNotFoundError,
    TMDbServiceError,
    WhereToWatchError,
)
from .image_utils import IMAGE_SIZES, tmdb_image_url

__all__ = [
    "WhereToWatchError",
    "ConfigurationError",
    "TMDbServiceError",
    "MovieNotFoundError",
    "HistoryStoreError",
    "AvailabilityError",
    "parse_date",
    "format_long_date",
    "format_time_ago",
    "IMAGE_SIZES",
    "tmdb_image_url",
]
