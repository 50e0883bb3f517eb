"""FastAPI dependency injection for the PressDesk API.

Provides dependencies for:
- The app's metrics source (mock, live or none), built by ``create_app``
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from pressdesk.application.ports.metrics import MetricsSource
from pressdesk.infrastructure.metrics import LiveMetricsSource

logger = logging.getLogger(__name__)


def get_metrics_source(request: Request) -> MetricsSource:
    """
    Get the metrics source bound to the running app.

    The live source keeps one HTTP connection pool for the app's lifetime.

    Returns
    -------
    MetricsSource selected by the settings the app was created with
    """
    return request.app.state.metrics_source


async def close_metrics_source(source: MetricsSource) -> None:
    """Release the resources held by ``source``."""
    if isinstance(source, LiveMetricsSource):
        await source.close()
        logger.info("Metrics backend client closed")


# Type aliases for injected dependencies
MetricsSourceDep = Annotated[MetricsSource, Depends(get_metrics_source)]
