"""Integration test fixtures and configuration."""

from unittest.mock import AsyncMock

import pytest
from click.testing import CliRunner

from where_to_watch.core.interfaces import IAvailabilityService, IHistoryStore, ITMDbService
from where_to_watch.core.services import AvailabilityService, JsonHistoryStore, TMDbService
from where_to_watch.infrastructure import Container


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def fake_tmdb(config, details_payload, providers_payload, release_dates_payload):
    """TMDb service answering from canned payloads instead of the network."""
    service = TMDbService(config)

    async def fetch(endpoint, params=None):
        if endpoint.endswith("/watch/providers"):
            return providers_payload
        if endpoint.endswith("/release_dates"):
            return release_dates_payload
        if endpoint.startswith("/movie/"):
            return details_payload
        return {
            "page": 1,
            "total_pages": 1,
            "total_results": 1,
            "results": [
                {
                    "id": 1001,
                    "title": "Night Harbor",
                    "release_date": "2024-01-10",
                    "vote_average": 7.4,
                }
            ],
        }

    service._fetch = AsyncMock(side_effect=fetch)
    return service


@pytest.fixture
def cli_container(config_manager, config, fake_tmdb):
    """Container wired with the fake TMDb service and a temporary history file."""
    container = Container(config_manager)
    container.register_instance(ITMDbService, fake_tmdb)
    container.register_instance(IHistoryStore, JsonHistoryStore(config))
    container.register_singleton(IAvailabilityService, AvailabilityService)
    return container


@pytest.fixture
def cli_obj(cli_container, config):
    """Click context object with the prepared container."""
    return {"container": cli_container, "config": config}


@pytest.fixture
def unwritable_history_obj(config_manager, config, fake_tmdb, tmp_path):
    """Click context object whose history file sits under a regular file."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    config.history.path = str(blocker / "history.json")

    container = Container(config_manager)
    container.register_instance(ITMDbService, fake_tmdb)
    container.register_instance(IHistoryStore, JsonHistoryStore(config))
    container.register_singleton(IAvailabilityService, AvailabilityService)
    return {"container": container, "config": config}
