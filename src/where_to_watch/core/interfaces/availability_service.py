"""Availability service interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import AvailabilityReport


class IAvailabilityService(ABC):
    """Interface for building a movie's availability report."""

    @abstractmethod
    async def build_report(
        self, movie_id: int, distributor: Optional[str] = None
    ) -> AvailabilityReport:
        """Gather providers and streaming estimates for a movie.

        Args:
            movie_id: TMDb movie ID.
            distributor: Distributor label selected by the user.

        Returns:
            Availability report.

        Raises:
            MovieNotFoundError: If the movie does not exist.
            AvailabilityError: If any upstream fetch fails.
        """
        pass
