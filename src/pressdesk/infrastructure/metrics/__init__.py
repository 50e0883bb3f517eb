"""Metrics source adapters (mock, live HTTP backend, none)."""

from pressdesk.infrastructure.metrics.factory import build_metrics_source
from pressdesk.infrastructure.metrics.live_metrics_source import (
    LiveMetricsSource,
    MetricsEnvelope,
)
from pressdesk.infrastructure.metrics.mock_metrics_source import MockMetricsSource
from pressdesk.infrastructure.metrics.null_metrics_source import NullMetricsSource

__all__ = [
    "LiveMetricsSource",
    "MetricsEnvelope",
    "MockMetricsSource",
    "NullMetricsSource",
    "build_metrics_source",
]
