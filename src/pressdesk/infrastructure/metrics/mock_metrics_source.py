"""Metrics source backed by bundled seed data."""

from __future__ import annotations

import copy
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pressdesk.application.dtos.dashboard import RawMetricsRecord
from pressdesk.infrastructure.metrics.seed_data import (
    MOCK_DASHBOARD_STATS,
    MOCK_REVENUE_DATA,
    mock_recent_activity,
    mock_recent_articles,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class MockMetricsSource:
    """Serve seed records for local development and demos.

    Activity and article timestamps are anchored to ``clock()`` so the feed
    always looks recent.
    """

    name = "mock"

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self._clock = clock

    async def fetch_statistics(self) -> RawMetricsRecord | None:
        record = copy.deepcopy(MOCK_DASHBOARD_STATS)
        record["recentActivity"] = mock_recent_activity(self._clock())
        return record

    async def fetch_activity(self) -> list[dict[str, Any]]:
        return mock_recent_activity(self._clock())

    async def fetch_recent_articles(self) -> list[dict[str, Any]]:
        return mock_recent_articles(self._clock())

    async def fetch_revenue(self) -> RawMetricsRecord | None:
        return copy.deepcopy(MOCK_REVENUE_DATA)
