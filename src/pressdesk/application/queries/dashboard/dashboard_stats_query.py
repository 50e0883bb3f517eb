"""Fetch raw statistics from a metrics source and normalize them."""

from __future__ import annotations

import logging

from pressdesk.application.dtos.dashboard import DashboardStatistics
from pressdesk.application.ports.metrics import MetricsSource
from pressdesk.application.services.metrics_normalizer import (
    MetricsNormalizer,
    normalize,
)

logger = logging.getLogger(__name__)


class DashboardStatsQuery:
    """Return the dashboard statistics view model."""

    def __init__(
        self,
        metrics_source: MetricsSource,
        normalizer: MetricsNormalizer | None = None,
    ):
        self._source = metrics_source
        self._normalizer = normalizer

    @classmethod
    def from_source(cls, metrics_source: MetricsSource) -> DashboardStatsQuery:
        return cls(metrics_source=metrics_source)

    async def execute(self) -> DashboardStatistics:
        raw = await self._source.fetch_statistics()
        if raw is None:
            logger.info(
                "Metrics source '%s' returned no record, using fallbacks",
                self._source.name,
            )
        if self._normalizer is None:
            return normalize(raw)
        return self._normalizer.normalize(raw)
