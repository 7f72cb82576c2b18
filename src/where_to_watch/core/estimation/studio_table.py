"""Typical streaming platforms and theatrical windows for major studios.

Values are general industry patterns, not licensing data, and vary
significantly from film to film.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from ..models import ProductionCompany, StudioEstimate

PLACEHOLDER_LOGO = "/placeholder-logo.svg"


def _estimate(platform_name: str, window_days: int) -> StudioEstimate:
    return StudioEstimate(
        platform_name=platform_name, window_days=window_days, logo_ref=PLACEHOLDER_LOGO
    )


# Keys are normalized (lowercase, trimmed) studio names
STUDIO_STREAMING_ESTIMATES: Mapping[str, StudioEstimate] = MappingProxyType(
    {
        # Disney / Fox
        "walt disney pictures": _estimate("Disney+", 60),
        "pixar": _estimate("Disney+", 60),
        "marvel studios": _estimate("Disney+", 60),
        "lucasfilm ltd.": _estimate("Disney+", 60),
        "searchlight pictures": _estimate("Hulu", 75),
        "20th century studios": _estimate("Hulu/Max", 75),
        # Warner Bros.
        "warner bros. pictures": _estimate("Max", 75),
        "new line cinema": _estimate("Max", 75),
        "dc films": _estimate("Max", 75),
        "dc studios": _estimate("Max", 75),
        # Universal
        "universal pictures": _estimate("Peacock", 45),
        "illumination": _estimate("Peacock", 45),
        "focus features": _estimate("Peacock", 45),
        # Paramount
        "paramount": _estimate("Paramount+", 45),
        # Sony, usually a longer window before Netflix
        "columbia pictures": _estimate("Netflix", 120),
        "sony pictures entertainment (spe)": _estimate("Netflix", 120),
        "screen gems": _estimate("Netflix", 120),
        # Lionsgate
        "lionsgate": _estimate("STARZ/Peacock", 180),
        # A24 varies between services
        "a24": _estimate("Max/Prime", 110),
    }
)

CompanyLike = Union[ProductionCompany, str]


def normalize_studio_name(name: str) -> str:
    """Normalize a studio name into a table key."""
    return name.strip().lower()


def lookup_by_studio(companies: Optional[Iterable[CompanyLike]]) -> Optional[StudioEstimate]:
    """Find the estimate for the first known production company.

    Matching is exact on the normalized name; parent companies are not
    inferred, so e.g. "Marvel Entertainment" does not match "marvel studios".

    Args:
        companies: Production companies in credit order, as models or names.

    Returns:
        Estimate for the first company present in the table, or None.
    """
    if not companies:
        return None

    for company in companies:
        name = company.name if isinstance(company, ProductionCompany) else company
        estimate = STUDIO_STREAMING_ESTIMATES.get(normalize_studio_name(name))
        if estimate is not None:
            return estimate

    return None
