"""Streaming estimate data models."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StudioEstimate(BaseModel):
    """Typical platform and theatrical window for a studio's releases."""

    platform_name: str = Field(..., description="Platform display name")
    window_days: int = Field(..., ge=0, description="Days from theatrical release")
    logo_ref: Optional[str] = Field(None, description="Platform logo reference")

    model_config = ConfigDict(frozen=True)


class EstimateSource(str, Enum):
    """What an estimation result was derived from."""

    STUDIO_MATCH = "studio_match"
    DISTRIBUTOR_SELECTION = "distributor_selection"
    NONE = "none"


class EstimationResult(BaseModel):
    """A projected platform and date for a movie."""

    platform_name: Optional[str] = Field(None, description="Predicted platform")
    projected_date: Optional[date] = Field(None, description="Predicted availability date")
    source: EstimateSource = Field(default=EstimateSource.NONE, description="Estimate origin")
    label: Optional[str] = Field(None, description="Distributor label behind the estimate")

    @property
    def available(self) -> bool:
        """Whether both platform and date could be projected."""
        return self.source != EstimateSource.NONE and self.projected_date is not None


class EstimationOutcome(BaseModel):
    """Studio and distributor estimates computed for one movie."""

    studio: Optional[EstimationResult] = Field(None, description="Studio-based estimate")
    distributor: Optional[EstimationResult] = Field(
        None, description="Estimate for the selected distributor"
    )

    @property
    def offer_distributor_selection(self) -> bool:
        """Distributor selection is the fallback when no studio estimate exists."""
        return self.studio is None or not self.studio.available
