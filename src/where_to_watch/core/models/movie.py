"""Movie-related data models."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class ProductionCompany(BaseModel):
    """Production company credited on a movie."""

    id: int = Field(..., description="TMDb company ID")
    name: str = Field(..., description="Company name")
    logo_path: Optional[str] = Field(None, description="Logo image path")
    origin_country: Optional[str] = Field(None, description="Country of origin")


class MovieSearchResult(BaseModel):
    """Single entry from a movie search."""

    tmdb_id: int = Field(..., description="TMDb ID")
    title: str = Field(..., description="Movie title")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    release_date: Optional[date] = Field(None, description="Release date")
    overview: Optional[str] = Field(None, description="Movie overview/plot")
    vote_average: Optional[float] = Field(None, description="Average rating")

    @property
    def year(self) -> Optional[int]:
        """Release year, if known."""
        return self.release_date.year if self.release_date else None


class SearchPage(BaseModel):
    """One page of search results."""

    query: str = Field(..., description="Query that produced the page")
    page: int = Field(default=1, ge=1, description="Page number")
    total_pages: int = Field(default=0, ge=0, description="Total pages available")
    total_results: int = Field(default=0, ge=0, description="Total matching movies")
    results: List[MovieSearchResult] = Field(default_factory=list, description="Results")


class MovieDetails(BaseModel):
    """Detailed movie information."""

    tmdb_id: int = Field(..., description="TMDb ID")
    title: str = Field(..., description="Movie title")
    tagline: Optional[str] = Field(None, description="Tagline")
    overview: Optional[str] = Field(None, description="Movie overview/plot")
    release_date: Optional[date] = Field(None, description="Release date")
    runtime: Optional[int] = Field(None, description="Runtime in minutes")
    vote_average: Optional[float] = Field(None, description="Average rating")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    backdrop_path: Optional[str] = Field(None, description="Backdrop image path")
    genres: List[str] = Field(default_factory=list, description="Movie genres")
    production_companies: List[ProductionCompany] = Field(
        default_factory=list, description="Production companies in credit order"
    )
    budget: Optional[int] = Field(None, description="Budget in USD")
    revenue: Optional[int] = Field(None, description="Box office revenue in USD")

    @property
    def year(self) -> Optional[int]:
        """Release year, if known."""
        return self.release_date.year if self.release_date else None
