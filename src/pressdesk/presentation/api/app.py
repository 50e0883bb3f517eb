"""PressDesk API app factory.

Wires the dashboard and navigation routers under ``/api/v1``, the
domain error handlers and CORS. ``/health`` and ``/`` stay outside the
versioned prefix.

Run with ``uvicorn --factory pressdesk.presentation.api.app:create_app``
or ``pressdesk serve``.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pressdesk.infrastructure.metrics import build_metrics_source
from pressdesk.presentation.api.dependencies import close_metrics_source
from pressdesk.presentation.api.exception_handlers import setup_exception_handlers
from pressdesk.presentation.api.routers import dashboard_router, navigation_router
from pressdesk.presentation.api.schemas.common import HealthResponse
from pressdesk_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

OPENAPI_TAGS = [
    {
        "name": "Dashboard",
        "description": """Statistics and widget feeds for the dashboard home page.

**Endpoints:**
- `/dashboard/stats` - Normalized statistics (totals, changes, charts)
- `/dashboard/activity` - Activity feed
- `/dashboard/articles` - Recent articles
- `/dashboard/revenue` - Revenue overview

Every payload is wrapped as `{data, success, message}`.
""",
    },
    {"name": "Navigation", "description": "Breadcrumb trails for route paths."},
    {"name": "Health", "description": "Liveness check."},
    {"name": "Info", "description": "Service name, version and entry points."},
]


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Send log records to stdout once per process.

    ``pressdesk.*`` loggers follow ``level_name``; httpx and httpcore are
    held at WARNING so per-request lines do not drown the output.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("pressdesk").setLevel(level)
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and release the app's metrics source on shutdown."""
    logger.info("PressDesk API %s starting", API_VERSION)
    yield
    logger.info("PressDesk API shutting down")
    await close_metrics_source(app.state.metrics_source)


def _build_api_router() -> APIRouter:
    router = APIRouter()
    router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])
    router.include_router(navigation_router, prefix="/navigation", tags=["Navigation"])
    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the PressDesk FastAPI application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached environment settings.

    Returns
    -------
    The application, ready to be served.
    """
    if settings is None:
        settings = get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Read models for the **content dashboard**: statistics, feeds and navigation.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.metrics_source = build_metrics_source(settings)
    setup_exception_handlers(app)
    app.include_router(_build_api_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health() -> HealthResponse:
        """Report liveness and the configured metrics source mode."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            metrics_source=settings.metrics_source,
        )

    @app.get("/", tags=["Info"])
    async def info() -> dict:
        """Name, version and where to find the endpoints."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "dashboard": f"{API_V1_PREFIX}/dashboard",
                "navigation": f"{API_V1_PREFIX}/navigation",
            },
        }

    return app
