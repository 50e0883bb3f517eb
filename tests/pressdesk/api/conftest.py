"""Fixtures for API endpoint tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from pressdesk.presentation.api.app import API_V1_PREFIX, create_app
from pressdesk.presentation.api.dependencies import get_metrics_source
from pressdesk_config import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    return Settings(metrics_source="mock", api_debug=False)


@pytest.fixture
def metrics_source(mock_source):
    """Metrics source served to the endpoints; override per test."""
    return mock_source


@pytest.fixture
def test_client(api_settings, metrics_source) -> Iterator[TestClient]:
    app = create_app(api_settings)
    app.dependency_overrides[get_metrics_source] = lambda: metrics_source
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
