"""Pytest configuration and fixtures."""

from unittest.mock import Mock

import pytest

from where_to_watch.config import ConfigManager
from where_to_watch.core.interfaces import ITMDbService
from where_to_watch.infrastructure import Container


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "integration: tests that exercise the CLI")


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = f"""
tmdb:
  api_key: "test-tmdb-key"
  retry_attempts: 1

history:
  path: "{tmp_path / 'history.json'}"
  max_searches: 3
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager):
    """Create a test container."""
    return Container(config_manager)


@pytest.fixture
def details_payload():
    """TMDb /movie/{id} response for a Universal release."""
    return {
        "id": 1001,
        "title": "Night Harbor",
        "tagline": "Nobody leaves the harbor.",
        "overview": "A dockworker uncovers a smuggling ring.",
        "release_date": "2024-01-10",
        "runtime": 112,
        "vote_average": 7.25,
        "poster_path": "/poster.jpg",
        "backdrop_path": "/backdrop.jpg",
        "genres": [{"id": 53, "name": "Thriller"}, {"id": 80, "name": "Crime"}],
        "production_companies": [
            {"id": 1, "logo_path": None, "name": "Unknown Studio", "origin_country": "US"},
            {"id": 33, "logo_path": "/u.png", "name": "Universal Pictures", "origin_country": "US"},
        ],
        "budget": 40000000,
        "revenue": 0,
    }


@pytest.fixture
def providers_payload():
    """TMDb /movie/{id}/watch/providers response without a US subscription offer."""
    return {
        "id": 1001,
        "results": {
            "US": {
                "link": "https://www.themoviedb.org/movie/1001/watch?locale=US",
                "rent": [
                    {
                        "logo_path": "/apple.jpg",
                        "provider_id": 2,
                        "provider_name": "Apple TV",
                        "display_priority": 4,
                    },
                    {
                        "logo_path": "/amazon.jpg",
                        "provider_id": 10,
                        "provider_name": "Amazon Video",
                        "display_priority": 1,
                    },
                ],
                "buy": [
                    {
                        "logo_path": "/amazon.jpg",
                        "provider_id": 10,
                        "provider_name": "Amazon Video",
                        "display_priority": 1,
                    }
                ],
            },
            "GB": {
                "link": "https://www.themoviedb.org/movie/1001/watch?locale=GB",
                "flatrate": [
                    {
                        "logo_path": "/sky.jpg",
                        "provider_id": 29,
                        "provider_name": "Sky Go",
                        "display_priority": 2,
                    }
                ],
            },
        },
    }


@pytest.fixture
def release_dates_payload():
    """TMDb /movie/{id}/release_dates response."""
    return {
        "id": 1001,
        "results": [
            {
                "iso_3166_1": "FR",
                "release_dates": [
                    {
                        "certification": "",
                        "iso_639_1": "",
                        "note": "Distributed by Pathé",
                        "release_date": "2024-01-17T00:00:00.000Z",
                        "type": 3,
                    }
                ],
            },
            {
                "iso_3166_1": "US",
                "release_dates": [
                    {
                        "certification": "",
                        "iso_639_1": "",
                        "note": "Toronto International Film Festival premiere",
                        "release_date": "2023-09-08T00:00:00.000Z",
                        "type": 1,
                    },
                    {
                        "certification": "R",
                        "iso_639_1": "",
                        "note": "Distributed by Universal Pictures & Focus Features",
                        "release_date": "2024-01-10T00:00:00.000Z",
                        "type": 3,
                    },
                    {
                        "certification": "R",
                        "iso_639_1": "",
                        "note": "",
                        "release_date": "2024-02-20T00:00:00.000Z",
                        "type": 4,
                    },
                ],
            },
        ],
    }


@pytest.fixture
def mock_tmdb_service():
    """Mock TMDb service."""
    return Mock(spec=ITMDbService)

