"""Root pytest configuration.

Test Structure:
    tests/
    └── pressdesk/
        ├── unit/        # Pure transforms, queries, metrics sources, CLI
        └── api/         # FastAPI endpoints through TestClient

Settings are loaded from config/.env.dev (or config/.env) when present,
the same way local development resolves them.
"""

from datetime import UTC, datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

from pressdesk.infrastructure.metrics import MockMetricsSource, NullMetricsSource
from pressdesk_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

FIXED_NOW = datetime(2025, 6, 6, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def mock_source(fixed_now) -> MockMetricsSource:
    """Mock source whose feed timestamps are anchored to ``fixed_now``."""
    return MockMetricsSource(clock=lambda: fixed_now)


@pytest.fixture
def null_source() -> NullMetricsSource:
    return NullMetricsSource()
