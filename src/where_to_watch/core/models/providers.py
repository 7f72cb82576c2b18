"""Watch provider data models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class WatchProvider(BaseModel):
    """A service offering a movie."""

    provider_id: int = Field(..., description="TMDb provider ID")
    provider_name: str = Field(..., description="Provider display name")
    logo_path: Optional[str] = Field(None, description="Logo image path")
    display_priority: int = Field(default=0, description="TMDb display ordering")


class RegionProviders(BaseModel):
    """Providers for a single region, split by offer type."""

    link: Optional[str] = Field(None, description="JustWatch page for the movie")
    flatrate: List[WatchProvider] = Field(default_factory=list, description="Subscription")
    rent: List[WatchProvider] = Field(default_factory=list, description="Rental")
    buy: List[WatchProvider] = Field(default_factory=list, description="Purchase")

    @property
    def has_flatrate(self) -> bool:
        """Whether a subscription service confirms availability."""
        return len(self.flatrate) > 0

    @property
    def has_buy_or_rent(self) -> bool:
        """Whether the movie can be rented or bought."""
        return bool(self.rent) or bool(self.buy)
