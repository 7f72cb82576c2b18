"""History data models."""

from datetime import datetime

from pydantic import BaseModel, Field


class SearchHistoryItem(BaseModel):
    """A past search."""

    query: str = Field(..., description="Search text")
    timestamp: datetime = Field(..., description="When the search was made")
