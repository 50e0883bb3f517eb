"""Select the metrics source implementation from settings."""

from __future__ import annotations

import logging

from pressdesk.application.ports.metrics import MetricsSource
from pressdesk.infrastructure.metrics.live_metrics_source import LiveMetricsSource
from pressdesk.infrastructure.metrics.mock_metrics_source import MockMetricsSource
from pressdesk.infrastructure.metrics.null_metrics_source import NullMetricsSource
from pressdesk_config.settings import Settings

logger = logging.getLogger(__name__)


def build_metrics_source(settings: Settings) -> MetricsSource:
    """Create the metrics source configured by ``settings.metrics_source``."""
    if settings.metrics_source == "live":
        logger.info("Using live metrics backend at %s", settings.metrics_backend_url)
        return LiveMetricsSource(
            base_url=settings.metrics_backend_url,
            timeout=settings.metrics_backend_timeout,
        )
    if settings.metrics_source == "none":
        logger.info("No metrics backend configured, serving fallbacks")
        return NullMetricsSource()

    logger.info("Using bundled mock metrics")
    return MockMetricsSource()
