"""Availability service implementation."""

import asyncio
from typing import Any, List, Optional

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import AvailabilityError, MovieNotFoundError, TMDbServiceError
from ..estimation import EstimationEngine, distributors_from_release_dates
from ..interfaces import IAvailabilityService, ITMDbService
from ..models import AvailabilityReport, EstimationOutcome, RegionProviders


class AvailabilityService(IAvailabilityService, LoggerMixin):
    """Builds availability reports from TMDb data.

    Flow for one movie:
    - Fetch details, watch providers and release dates concurrently
    - Keep the providers of the reference region
    - If a subscription provider is confirmed, stop there
    - Otherwise guess distributors from the theatrical release note and
      estimate the streaming platform from the studio and, when given,
      the user-selected distributor
    """

    def __init__(
        self,
        config: Config,
        tmdb_service: ITMDbService,
        engine: Optional[EstimationEngine] = None,
    ) -> None:
        """Initialize availability service.

        Args:
            config: Application configuration.
            tmdb_service: TMDb service.
            engine: Estimation engine. If None, creates default.
        """
        self._config = config
        self._region = config.tmdb.region
        self._tmdb_service = tmdb_service
        self._engine = engine or EstimationEngine()

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
        self.logger.info(f"Building availability report for movie {movie_id}")

        tasks = [
            asyncio.ensure_future(self._tmdb_service.get_movie_details(movie_id)),
            asyncio.ensure_future(self._tmdb_service.get_watch_providers(movie_id)),
            asyncio.ensure_future(self._tmdb_service.get_release_dates(movie_id)),
        ]
        try:
            details, providers_by_region, release_dates = await asyncio.gather(*tasks)
        except MovieNotFoundError:
            raise
        except (TMDbServiceError, ValueError) as e:
            error_msg = f"Failed to fetch data for movie {movie_id}: {e}"
            self.logger.error(error_msg)
            raise AvailabilityError(error_msg) from e
        finally:
            await _cancel_pending(tasks)

        providers = providers_by_region.get(self._region) or RegionProviders()
        report = AvailabilityReport(
            movie=details,
            region=self._region,
            providers=providers,
            selected_distributor=distributor,
        )

        if providers.has_flatrate:
            self.logger.debug(f"Movie {movie_id} is streaming, no estimate needed")
            report.estimates = EstimationOutcome()
            return report

        report.potential_distributors = distributors_from_release_dates(
            release_dates, self._region
        )
        report.estimates = self._engine.estimate(
            details.production_companies,
            details.release_date,
            distributor_label=distributor,
        )

        studio = report.estimates.studio
        if studio is not None and studio.available:
            self.logger.info(
                f"Estimated {studio.platform_name} on {studio.projected_date} for movie {movie_id}"
            )
        return report


async def _cancel_pending(tasks: List["asyncio.Future[Any]"]) -> None:
    """Cancel unfinished fetches and wait for them to wind down."""
    pending = [task for task in tasks if not task.done()]
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
