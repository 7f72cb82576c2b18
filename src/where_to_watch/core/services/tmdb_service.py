"""TMDb service implementation."""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import MovieNotFoundError, TMDbServiceError, parse_date
from ..interfaces import ITMDbService
from ..models import (
    CountryReleaseDates,
    MovieDetails,
    MovieSearchResult,
    ProductionCompany,
    RegionProviders,
    ReleaseDateRecord,
    ReleaseType,
    SearchPage,
    WatchProvider,
)


class TransientTMDbError(TMDbServiceError):
    """TMDb answered with a status worth retrying (rate limit or server error)."""

    pass


RETRYABLE_EXCEPTIONS = (aiohttp.ClientConnectionError, asyncio.TimeoutError, TransientTMDbError)


class TMDbService(ITMDbService, LoggerMixin):
    """TMDb service implementation."""

    def __init__(self, config: Config) -> None:
        """Initialize TMDb service.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._tmdb_config = config.tmdb
        self._session: Optional[aiohttp.ClientSession] = None

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
        if not query or not query.strip():
            raise ValueError("Search query is required")

        data = await self._fetch(
            "/search/movie",
            {"query": query.strip(), "page": str(page), "include_adult": "false"},
        )

        results = data.get("results", [])
        if not isinstance(results, list):
            results = []

        search_page = SearchPage(
            query=query.strip(),
            page=data.get("page") or page,
            total_pages=data.get("total_pages") or 0,
            total_results=data.get("total_results") or 0,
            results=[self._parse_search_result(r) for r in results if r.get("id") is not None],
        )
        self.logger.info(f"Found {search_page.total_results} movies for {query!r}")
        return search_page

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """Get detailed movie information.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Movie details.

        Raises:
            ValueError: If movie ID is missing.
            MovieNotFoundError: If the movie does not exist.
            TMDbServiceError: If request fails.
        """
        self._require_movie_id(movie_id)
        data = await self._fetch(f"/movie/{movie_id}")
        return self._parse_movie_details(data)

    async def get_watch_providers(self, movie_id: int) -> Dict[str, RegionProviders]:
        """Get watch providers for every region.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Providers keyed by region code.

        Raises:
            ValueError: If movie ID is missing.
            TMDbServiceError: If request fails.
        """
        self._require_movie_id(movie_id)
        data = await self._fetch(f"/movie/{movie_id}/watch/providers")

        results = data.get("results") or {}
        return {
            region.upper(): self._parse_region_providers(region_data)
            for region, region_data in results.items()
            if isinstance(region_data, dict)
        }

    async def get_release_dates(self, movie_id: int) -> List[CountryReleaseDates]:
        """Get release dates for every country.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Release dates grouped by country.

        Raises:
            ValueError: If movie ID is missing.
            TMDbServiceError: If request fails.
        """
        self._require_movie_id(movie_id)
        data = await self._fetch(f"/movie/{movie_id}/release_dates")

        countries = []
        for country in data.get("results") or []:
            code = country.get("iso_3166_1")
            if not code:
                continue
            records = [
                record
                for record in (
                    self._parse_release_record(r) for r in country.get("release_dates") or []
                )
                if record is not None
            ]
            countries.append(CountryReleaseDates(iso_3166_1=code, release_dates=records))
        return countries

    async def _fetch(
        self, endpoint: str, params: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """Fetch a TMDb endpoint, retrying transient failures.

        Args:
            endpoint: Path below the API base URL.
            params: Extra query parameters.

        Returns:
            Decoded JSON body.

        Raises:
            MovieNotFoundError: If TMDb answers 404.
            TMDbServiceError: If the request fails.
        """
        url = f"{self._tmdb_config.base_url}{endpoint}"
        query = {"api_key": self._tmdb_config.api_key, "language": self._tmdb_config.language}
        if params:
            query.update(params)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._tmdb_config.retry_attempts),
            wait=wait_exponential(multiplier=0.5, max=4),
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    return await self._fetch_once(url, query)
        except TMDbServiceError:
            raise
        except Exception as e:
            error_msg = f"Failed to fetch from TMDb {endpoint}: {e}"
            self.logger.error(error_msg)
            raise TMDbServiceError(error_msg) from e

        raise TMDbServiceError(f"Failed to fetch from TMDb {endpoint}")

    async def _fetch_once(self, url: str, query: Dict[str, str]) -> Dict[str, Any]:
        async with self._get_session().get(url, params=query) as response:
            if response.status >= 400:
                try:
                    error_data = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError):
                    error_data = {}
                if not isinstance(error_data, dict):
                    error_data = {}
                message = error_data.get("status_message") or response.reason
                error_msg = f"TMDb API request failed with status {response.status}: {message}"

                if response.status == 404:
                    raise MovieNotFoundError(error_msg)
                self.logger.error(error_msg)
                if response.status == 429 or response.status >= 500:
                    raise TransientTMDbError(error_msg)
                raise TMDbServiceError(error_msg)

            data = await response.json()
            if not isinstance(data, dict):
                raise TMDbServiceError(f"Unexpected TMDb response for {url}")
            return data

    @staticmethod
    def _require_movie_id(movie_id: int) -> None:
        if not movie_id:
            raise ValueError("Movie ID is required")

    def _parse_search_result(self, data: dict) -> MovieSearchResult:
        return MovieSearchResult(
            tmdb_id=data["id"],
            title=data.get("title", ""),
            poster_path=data.get("poster_path"),
            release_date=parse_date(data.get("release_date")),
            overview=data.get("overview"),
            vote_average=data.get("vote_average"),
        )

    def _parse_movie_details(self, data: dict) -> MovieDetails:
        """Parse TMDb movie details into MovieDetails.

        Args:
            data: TMDb movie data.

        Returns:
            MovieDetails object.
        """
        companies = [
            ProductionCompany(
                id=c.get("id", 0),
                name=c.get("name", ""),
                logo_path=c.get("logo_path"),
                origin_country=c.get("origin_country") or None,
            )
            for c in data.get("production_companies") or []
            if c.get("name")
        ]

        return MovieDetails(
            tmdb_id=data["id"],
            title=data.get("title", ""),
            tagline=data.get("tagline") or None,
            overview=data.get("overview") or None,
            release_date=parse_date(data.get("release_date")),
            runtime=data.get("runtime"),
            vote_average=data.get("vote_average"),
            poster_path=data.get("poster_path"),
            backdrop_path=data.get("backdrop_path"),
            genres=[g["name"] for g in data.get("genres") or [] if g.get("name")],
            production_companies=companies,
            budget=data.get("budget") or None,
            revenue=data.get("revenue") or None,
        )

    def _parse_region_providers(self, data: dict) -> RegionProviders:
        def providers(key: str) -> List[WatchProvider]:
            parsed = [
                WatchProvider(
                    provider_id=p["provider_id"],
                    provider_name=p.get("provider_name", ""),
                    logo_path=p.get("logo_path"),
                    display_priority=p.get("display_priority", 0),
                )
                for p in data.get(key) or []
                if p.get("provider_id") is not None
            ]
            return sorted(parsed, key=lambda p: p.display_priority)

        return RegionProviders(
            link=data.get("link"),
            flatrate=providers("flatrate"),
            rent=providers("rent"),
            buy=providers("buy"),
        )

    def _parse_release_record(self, data: dict) -> Optional[ReleaseDateRecord]:
        try:
            release_type = ReleaseType(data.get("type"))
        except ValueError:
            self.logger.debug(f"Skipping release with unknown type: {data.get('type')}")
            return None

        return ReleaseDateRecord(
            release_type=release_type,
            release_date=parse_date(data.get("release_date")),
            note=data.get("note") or None,
            certification=data.get("certification") or None,
            iso_639_1=data.get("iso_639_1") or None,
        )

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._tmdb_config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
