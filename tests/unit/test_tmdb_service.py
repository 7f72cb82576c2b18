"""Unit tests for the TMDb service."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from where_to_watch.core.models import ReleaseType
from where_to_watch.core.services.tmdb_service import TMDbService
from where_to_watch.utils import MovieNotFoundError, TMDbServiceError


class FakeResponse:
    """Minimal stand-in for an aiohttp response."""

    def __init__(self, status, payload, reason="OK"):
        self.status = status
        self.reason = reason
        self._payload = payload

    async def json(self, **kwargs):
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Returns queued responses and records requests."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        return self._responses.pop(0)


@pytest.fixture
def tmdb_service(config):
    """TMDbService instance for testing."""
    return TMDbService(config)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_get_movie_details_parses_payload(tmdb_service, details_payload):
    """Details are parsed with companies in credit order."""
    with patch.object(tmdb_service, "_fetch", AsyncMock(return_value=details_payload)) as fetch:
        details = await tmdb_service.get_movie_details(1001)

    fetch.assert_awaited_once_with("/movie/1001")
    assert details.tmdb_id == 1001
    assert details.title == "Night Harbor"
    assert details.release_date == date(2024, 1, 10)
    assert details.year == 2024
    assert details.genres == ["Thriller", "Crime"]
    assert [c.name for c in details.production_companies] == [
        "Unknown Studio",
        "Universal Pictures",
    ]
    assert details.budget == 40000000
    assert details.revenue is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_get_watch_providers_parses_regions(tmdb_service, providers_payload):
    """Providers are grouped by region and sorted by display priority."""
    with patch.object(tmdb_service, "_fetch", AsyncMock(return_value=providers_payload)):
        providers = await tmdb_service.get_watch_providers(1001)

    assert set(providers) == {"US", "GB"}
    us = providers["US"]
    assert not us.has_flatrate
    assert us.has_buy_or_rent
    assert [p.provider_name for p in us.rent] == ["Amazon Video", "Apple TV"]
    assert us.link.endswith("locale=US")
    assert providers["GB"].has_flatrate


@pytest.mark.unit
@pytest.mark.asyncio
async def test_get_release_dates_parses_records(tmdb_service, release_dates_payload):
    """Release records keep their type, note and date."""
    release_dates_payload["results"][1]["release_dates"].append(
        {"note": "odd", "release_date": "2024-05-01T00:00:00.000Z", "type": 9}
    )

    with patch.object(tmdb_service, "_fetch", AsyncMock(return_value=release_dates_payload)):
        countries = await tmdb_service.get_release_dates(1001)

    assert [c.iso_3166_1 for c in countries] == ["FR", "US"]
    us_records = countries[1].release_dates
    assert [r.release_type for r in us_records] == [
        ReleaseType.PREMIERE,
        ReleaseType.THEATRICAL,
        ReleaseType.DIGITAL,
    ]
    assert us_records[1].note == "Distributed by Universal Pictures & Focus Features"
    assert us_records[1].release_date == date(2024, 1, 10)
    assert us_records[2].note is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_search_movies(tmdb_service):
    """Search results are parsed and the query is trimmed."""
    payload = {
        "page": 1,
        "total_pages": 2,
        "total_results": 25,
        "results": [
            {"id": 1, "title": "Dune", "release_date": "2021-09-15", "vote_average": 7.8},
            {"id": 2, "title": "Dune Drifter", "release_date": "", "vote_average": 0},
        ],
    }

    with patch.object(tmdb_service, "_fetch", AsyncMock(return_value=payload)) as fetch:
        page = await tmdb_service.search_movies("  dune ")

    params = fetch.await_args.args[1]
    assert params["query"] == "dune"
    assert params["page"] == "1"
    assert page.query == "dune"
    assert page.total_results == 25
    assert [r.title for r in page.results] == ["Dune", "Dune Drifter"]
    assert page.results[0].year == 2021
    assert page.results[1].release_date is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_empty_query_rejected(tmdb_service):
    """An empty query is a caller error."""
    with pytest.raises(ValueError):
        await tmdb_service.search_movies("   ")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_movie_id_rejected(tmdb_service):
    """A missing movie ID is a caller error."""
    with pytest.raises(ValueError):
        await tmdb_service.get_movie_details(0)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_fetch_sends_api_key_and_language(tmdb_service, details_payload):
    """Requests carry the API key and language."""
    session = FakeSession(FakeResponse(200, details_payload))

    with patch.object(tmdb_service, "_get_session", return_value=session):
        await tmdb_service.get_movie_details(1001)

    url, params = session.calls[0]
    assert url == "https://api.themoviedb.org/3/movie/1001"
    assert params == {"api_key": "test-tmdb-key", "language": "en-US"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_fetch_not_found(tmdb_service):
    """A 404 raises MovieNotFoundError."""
    session = FakeSession(
        FakeResponse(404, {"status_message": "The resource you requested could not be found."})
    )

    with patch.object(tmdb_service, "_get_session", return_value=session):
        with pytest.raises(MovieNotFoundError):
            await tmdb_service.get_movie_details(999999)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_fetch_error_includes_status_message(tmdb_service):
    """Client errors surface TMDb's status message and are not retried."""
    tmdb_service._tmdb_config.retry_attempts = 3
    session = FakeSession(
        FakeResponse(401, {"status_message": "Invalid API key"}, reason="Unauthorized")
    )

    with patch.object(tmdb_service, "_get_session", return_value=session):
        with pytest.raises(TMDbServiceError, match="status 401: Invalid API key"):
            await tmdb_service.get_movie_details(1001)

    assert len(session.calls) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_fetch_retries_server_errors(tmdb_service, details_payload):
    """Server errors are retried until a response succeeds."""
    tmdb_service._tmdb_config.retry_attempts = 2
    session = FakeSession(
        FakeResponse(503, {}, reason="Service Unavailable"),
        FakeResponse(200, details_payload),
    )

    with patch.object(tmdb_service, "_get_session", return_value=session):
        details = await tmdb_service.get_movie_details(1001)

    assert details.title == "Night Harbor"
    assert len(session.calls) == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_fetch_gives_up_after_retry_attempts(tmdb_service):
    """Persistent server errors raise TMDbServiceError."""
    session = FakeSession(FakeResponse(500, {}, reason="Internal Server Error"))

    with patch.object(tmdb_service, "_get_session", return_value=session):
        with pytest.raises(TMDbServiceError, match="status 500"):
            await tmdb_service.get_movie_details(1001)
