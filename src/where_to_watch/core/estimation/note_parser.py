"""Best-effort distributor extraction from release-date notes.

TMDb release dates rarely name the distributor, so anything returned here
is a guess and must be shown to users as unreliable.
"""

import re
from typing import Iterable, List, Optional

from ..models import CountryReleaseDates, ReleaseDateRecord, ReleaseType

DISTRIBUTED_BY_PATTERN = re.compile(r"distributed by (.*)", re.IGNORECASE)
DISTRIBUTOR_SEPARATOR_PATTERN = re.compile(r"[,&]")


def parse_distributors(
    note: Optional[str], release_type: ReleaseType = ReleaseType.THEATRICAL
) -> List[str]:
    """Extract candidate distributor names from a release note.

    Args:
        note: Free-text note of a release-date record.
        release_type: Type of the record the note belongs to. Only wide
            theatrical releases are considered.

    Returns:
        Distributor names in the order found, possibly empty.

    Examples:
        >>> parse_distributors("Distributed by A24, Focus Features & Neon")
        ['A24', 'Focus Features', 'Neon']
        >>> parse_distributors("World premiere")
        []
    """
    if not note or release_type != ReleaseType.THEATRICAL:
        return []

    match = DISTRIBUTED_BY_PATTERN.search(note)
    if match and match.group(1):
        names = DISTRIBUTOR_SEPARATOR_PATTERN.split(match.group(1))
        return [name.strip() for name in names if name.strip()]

    # Speculative: a note that isn't about a premiere may just be the distributor
    if "premiere" not in note.lower():
        stripped = note.strip()
        return [stripped] if stripped else []

    return []


def find_reference_release(
    release_dates: Iterable[CountryReleaseDates], region: str = "US"
) -> Optional[ReleaseDateRecord]:
    """Find the first wide theatrical release in the reference region."""
    for country in release_dates:
        if country.iso_3166_1.upper() != region.upper():
            continue
        for record in country.release_dates:
            if record.release_type == ReleaseType.THEATRICAL:
                return record
        return None
    return None


def distributors_from_release_dates(
    release_dates: Iterable[CountryReleaseDates], region: str = "US"
) -> List[str]:
    """Guess distributors from the reference region's theatrical release note."""
    record = find_reference_release(release_dates, region)
    if record is None:
        return []
    return parse_distributors(record.note, record.release_type)
