"""Metrics source for deployments without a configured backend."""

from __future__ import annotations

from typing import Any

from pressdesk.application.dtos.dashboard import RawMetricsRecord


class NullMetricsSource:
    """Supply nothing; the dashboard renders from fallbacks only."""

    name = "none"

    async def fetch_statistics(self) -> RawMetricsRecord | None:
        return None

    async def fetch_activity(self) -> list[dict[str, Any]]:
        return []

    async def fetch_recent_articles(self) -> list[dict[str, Any]]:
        return []

    async def fetch_revenue(self) -> RawMetricsRecord | None:
        return None
