"""Streaming availability estimation."""

from .distributors import DISTRIBUTOR_LABELS, resolve_distributor_estimate
from .engine import EstimationEngine, project_date
from .note_parser import distributors_from_release_dates, find_reference_release, parse_distributors
from .studio_table import STUDIO_STREAMING_ESTIMATES, lookup_by_studio, normalize_studio_name

__all__ = [
    "DISTRIBUTOR_LABELS",
    "STUDIO_STREAMING_ESTIMATES",
    "EstimationEngine",
    "distributors_from_release_dates",
    "find_reference_release",
    "lookup_by_studio",
    "normalize_studio_name",
    "parse_distributors",
    "project_date",
    "resolve_distributor_estimate",
]
