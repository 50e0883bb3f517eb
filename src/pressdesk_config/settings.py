"""PressDesk settings.

Values resolve from, highest priority first:

1. process environment variables
2. the file named by ``PRESSDESK_ENV_FILE`` (absolute, or relative to the
   project root)
3. ``config/.env.dev`` for local development
4. ``config/.env`` for deployments
5. the defaults declared on :class:`Settings`
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MetricsSourceMode = Literal["mock", "live", "none"]

_ENV_FILE_VARIABLE = "PRESSDESK_ENV_FILE"
_ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _find_project_root() -> Path:
    """Walk up from this package to the directory holding ``config/`` or ``.git``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
        if candidate == Path("/app"):
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    """Directory searched for ``.env`` files."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(_ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in _ENV_FILE_CANDIDATES:
        candidate = config_dir / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration for the API, CLI and metrics source."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "PressDesk"
    debug: bool = False

    # HTTP server; docs are only exposed when api_debug is on
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma separated, empty disables CORS

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    # Metrics source
    # mock: bundled seed data, live: upstream HTTP backend, none: fallbacks only
    metrics_source: MetricsSourceMode = "mock"
    metrics_backend_url: str = "http://localhost:8001"
    metrics_backend_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
