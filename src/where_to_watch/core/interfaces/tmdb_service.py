"""TMDb service interface."""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models import CountryReleaseDates, MovieDetails, RegionProviders, SearchPage


class ITMDbService(ABC):
    """Interface for TMDb services."""

    @abstractmethod
    async def search_movies(self, query: str, page: int = 1) -> SearchPage:
        """Search for movies by title.

        Args:
            query: Search text.
            page: Result page, starting at 1.

        Returns:
            Page of search results.

        Raises:
            ValueError: If query is empty.
            TMDbServiceError: If search fails.
        """
        pass

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """Get detailed movie information.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Movie details.

        Raises:
            MovieNotFoundError: If the movie does not exist.
            TMDbServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def get_watch_providers(self, movie_id: int) -> Dict[str, RegionProviders]:
        """Get watch providers for every region.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Providers keyed by region code.

        Raises:
            TMDbServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def get_release_dates(self, movie_id: int) -> List[CountryReleaseDates]:
        """Get release dates for every country.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Release dates grouped by country.

        Raises:
            TMDbServiceError: If request fails.
        """
        pass
