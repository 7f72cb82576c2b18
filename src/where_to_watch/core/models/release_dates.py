"""Release date data models."""

from datetime import date
from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class ReleaseType(IntEnum):
    """TMDb release type codes."""

    PREMIERE = 1
    THEATRICAL_LIMITED = 2
    THEATRICAL = 3
    DIGITAL = 4
    PHYSICAL = 5
    TV = 6


class ReleaseDateRecord(BaseModel):
    """A single release of a movie in one country."""

    release_type: ReleaseType = Field(..., description="Kind of release")
    release_date: Optional[date] = Field(None, description="Release date")
    note: Optional[str] = Field(None, description="Free-text note")
    certification: Optional[str] = Field(None, description="Age certification")
    iso_639_1: Optional[str] = Field(None, description="Language code")


class CountryReleaseDates(BaseModel):
    """All releases of a movie in one country."""

    iso_3166_1: str = Field(..., description="Country code")
    release_dates: List[ReleaseDateRecord] = Field(default_factory=list, description="Releases")
