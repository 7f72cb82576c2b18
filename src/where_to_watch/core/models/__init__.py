"""Core data models."""

from .availability import AvailabilityReport
from .estimate import EstimateSource, EstimationOutcome, EstimationResult, StudioEstimate
from .history import SearchHistoryItem
from .movie import MovieDetails, MovieSearchResult, ProductionCompany, SearchPage
from .providers import RegionProviders, WatchProvider
from .release_dates import CountryReleaseDates, ReleaseDateRecord, ReleaseType

__all__ = [
    "AvailabilityReport",
    "CountryReleaseDates",
    "EstimateSource",
    "EstimationOutcome",
    "EstimationResult",
    "MovieDetails",
    "MovieSearchResult",
    "ProductionCompany",
    "RegionProviders",
    "ReleaseDateRecord",
    "ReleaseType",
    "SearchHistoryItem",
    "SearchPage",
    "StudioEstimate",
    "WatchProvider",
]
