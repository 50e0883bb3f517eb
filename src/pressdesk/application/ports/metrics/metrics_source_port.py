"""Metrics source port (report-like interface).

Each method corresponds to one dashboard widget. Implementations return
plain JSON-shaped data; shape guarantees are established by the
normalizer and the queries, not by the source.
"""

from __future__ import annotations

from typing import Any, Protocol

from pressdesk.application.dtos.dashboard import RawMetricsRecord


class MetricsSource(Protocol):
    """Anything able to supply raw dashboard metrics, mock or live."""

    @property
    def name(self) -> str:
        """Short identifier used in logs and health output."""
        ...

    async def fetch_statistics(self) -> RawMetricsRecord | None:
        """Aggregate statistics record (``current``/``previous``/``growth``).

        ``None`` means no backend is configured; the normalizer then falls
        back to its defaults.
        """
        ...

    async def fetch_activity(self) -> list[dict[str, Any]]:
        """Raw activity feed items."""
        ...

    async def fetch_recent_articles(self) -> list[dict[str, Any]]:
        """Raw recently published/edited articles."""
        ...

    async def fetch_revenue(self) -> RawMetricsRecord | None:
        """Raw revenue overview (chart data, products, affiliate networks)."""
        ...
