"""Availability report data models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .estimate import EstimationOutcome
from .movie import MovieDetails
from .providers import RegionProviders


class AvailabilityReport(BaseModel):
    """Everything needed to show where a movie can be watched."""

    movie: MovieDetails = Field(..., description="Movie details")
    region: str = Field(..., description="Reference region")
    providers: RegionProviders = Field(
        default_factory=RegionProviders, description="Providers in the reference region"
    )
    potential_distributors: List[str] = Field(
        default_factory=list, description="Distributors guessed from release notes (unreliable)"
    )
    estimates: EstimationOutcome = Field(
        default_factory=EstimationOutcome, description="Streaming estimates"
    )
    selected_distributor: Optional[str] = Field(None, description="User-selected distributor")

    @property
    def has_flatrate(self) -> bool:
        """Whether a subscription service confirms availability."""
        return self.providers.has_flatrate

    @property
    def offer_distributor_selection(self) -> bool:
        """Whether to ask the user for the distributor."""
        return not self.has_flatrate and self.estimates.offer_distributor_selection

    @property
    def nothing_available(self) -> bool:
        """No stream, rental, purchase or studio estimate to show."""
        studio = self.estimates.studio
        return (
            not self.has_flatrate
            and not self.providers.has_buy_or_rent
            and not (studio is not None and studio.available)
        )
