"""Normalize raw metrics records into the dashboard statistics view model.

Sources differ in shape (bundled mock data, a live backend, nothing at
all). The normalizer accepts any of them and always returns a fully
populated :class:`DashboardStatistics`:

- Scalar fields follow an explicit default table. A field falls back to its
  constant only when the source value is absent or unreadable; a present
  ``0`` is kept.
- List fields use the source list when it yields at least one valid item,
  otherwise a fixed seed list. Lists are re-ordered to the view-model
  invariants regardless of source order.

The transform is pure: no I/O, no clock, no shared mutable state.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

from pressdesk.application.dtos.dashboard import (
    ActivityEvent,
    ActivityType,
    DashboardStatistics,
    RawMetricsRecord,
    RevenueSample,
    TopArticle,
    TrafficSource,
)
from pressdesk.application.services.chart_helpers import (
    calculate_percentage_change,
    clamp_percentage,
)
from pressdesk.application.services.raw_values import (
    as_list,
    as_mapping,
    first_present,
    to_date,
    to_datetime,
    to_int,
    to_number,
    to_text,
)


@dataclass(frozen=True)
class FieldDefault:
    """Where a scalar output field is read from, and its fallback.

    ``group``/``key`` of ``None`` means no live source is wired in and the
    fallback is always used.
    """

    group: str | None
    key: str | None
    fallback: float
    integral: bool = False


FIELD_DEFAULTS: dict[str, FieldDefault] = {
    "total_articles": FieldDefault("current", "articles", 45, integral=True),
    "published_articles": FieldDefault("current", "articles", 45, integral=True),
    "draft_articles": FieldDefault("current", "drafts", 0, integral=True),
    "total_views": FieldDefault("current", "views", 12543, integral=True),
    "total_clicks": FieldDefault("current", "clicks", 3421, integral=True),
    "total_revenue": FieldDefault("current", "revenue", 1847.50),
    "monthly_revenue": FieldDefault("current", "revenue", 1847.50),
    "total_comments": FieldDefault(None, None, 234, integral=True),
    "conversion_rate": FieldDefault(None, None, 3.7),
    "views_change": FieldDefault("growth", "views", 27.0),
    "revenue_change": FieldDefault("growth", "revenue", 29.0),
    "articles_change": FieldDefault("growth", "articles", 18.4),
    "comments_change": FieldDefault(None, None, 15.2),
}

SEED_TOP_ARTICLES: tuple[TopArticle, ...] = (
    TopArticle(id="1", title="Best Laptops for Developers", views=523, revenue=125.50),
    TopArticle(id="2", title="AI Tools for Content Creation", views=412, revenue=89.25),
    TopArticle(id="3", title="Web Development in 2025", views=387, revenue=67.75),
)

SEED_RECENT_ACTIVITY: tuple[ActivityEvent, ...] = (
    ActivityEvent(
        id="1",
        type=ActivityType.ARTICLE_PUBLISHED,
        description='Published "Best Laptops for Developers"',
        timestamp=datetime(2025, 6, 6, 12, 0, tzinfo=UTC),
    ),
    ActivityEvent(
        id="2",
        type=ActivityType.REVENUE_EARNED,
        description="Earned $25.50 from affiliate sales",
        timestamp=datetime(2025, 6, 6, 11, 0, tzinfo=UTC),
    ),
    ActivityEvent(
        id="3",
        type=ActivityType.COMMENT_ADDED,
        description='New comment on "AI Tools"',
        timestamp=datetime(2025, 6, 6, 10, 0, tzinfo=UTC),
    ),
)

SEED_REVENUE_CHART: tuple[RevenueSample, ...] = (
    RevenueSample(date=date(2025, 6, 1), revenue=245.50, clicks=423),
    RevenueSample(date=date(2025, 6, 2), revenue=312.75, clicks=512),
    RevenueSample(date=date(2025, 6, 3), revenue=189.25, clicks=334),
    RevenueSample(date=date(2025, 6, 4), revenue=425.00, clicks=623),
    RevenueSample(date=date(2025, 6, 5), revenue=367.50, clicks=545),
    RevenueSample(date=date(2025, 6, 6), revenue=298.25, clicks=467),
)

SEED_TRAFFIC_SOURCES: tuple[TrafficSource, ...] = (
    TrafficSource(source="Google", visits=5234, percentage=42.0),
    TrafficSource(source="Direct", visits=3123, percentage=25.0),
    TrafficSource(source="Social Media", visits=2456, percentage=20.0),
    TrafficSource(source="Referral", visits=1730, percentage=13.0),
)

# Keys under which a richer source may supply each list
TOP_ARTICLES_KEYS = ("topPerformingArticles", "top_performing_articles")
RECENT_ACTIVITY_KEYS = ("recentActivity", "recent_activity")
REVENUE_CHART_KEYS = ("revenueChart", "revenue_chart", "chartData", "chart_data")
TRAFFIC_SOURCES_KEYS = ("trafficSources", "traffic_sources")


class MetricsNormalizer:
    """Turns a raw metrics record into :class:`DashboardStatistics`."""

    def __init__(self, field_defaults: Mapping[str, FieldDefault] | None = None):
        self._defaults = {**FIELD_DEFAULTS, **(field_defaults or {})}

    def normalize(self, raw: Any = None) -> DashboardStatistics:
        """Build the statistics view model; never raises."""
        record = as_mapping(raw)
        scalars = {name: self._scalar(record, name) for name in FIELD_DEFAULTS}

        return DashboardStatistics(
            **scalars,
            top_performing_articles=self._top_articles(record),
            recent_activity=self._recent_activity(record),
            revenue_chart=self._revenue_chart(record),
            traffic_sources=self._traffic_sources(record),
        )

    # -------------------------------------------------------------------------
    # Scalars
    # -------------------------------------------------------------------------

    def _scalar(self, record: RawMetricsRecord, name: str) -> int | float:
        entry = self._defaults[name]
        value = self._read(record, entry)
        if value is None:
            value = entry.fallback
        return int(round(value)) if entry.integral else float(value)

    @staticmethod
    def _read(record: RawMetricsRecord, entry: FieldDefault) -> float | None:
        if entry.group is None or entry.key is None:
            return None

        value = to_number(as_mapping(record.get(entry.group)).get(entry.key))
        if value is not None or entry.group != "growth":
            return value

        # No explicit growth figure: derive it from the two periods
        current = to_number(as_mapping(record.get("current")).get(entry.key))
        previous = to_number(as_mapping(record.get("previous")).get(entry.key))
        if current is None or previous is None:
            return None
        change = calculate_percentage_change(current, previous)
        return round(change, 1) if math.isfinite(change) else None

    # -------------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------------

    def _top_articles(self, record: RawMetricsRecord) -> tuple[TopArticle, ...]:
        items = [
            article
            for position, item in enumerate(
                as_list(first_present(record, *TOP_ARTICLES_KEYS))
            )
            if (article := self._top_article(item, position)) is not None
        ]
        return tuple(
            sorted(items or SEED_TOP_ARTICLES, key=lambda a: a.views, reverse=True)
        )

    def _recent_activity(self, record: RawMetricsRecord) -> tuple[ActivityEvent, ...]:
        events = [
            event
            for position, item in enumerate(
                as_list(first_present(record, *RECENT_ACTIVITY_KEYS))
            )
            if (event := self._activity_event(item, position)) is not None
        ]
        return tuple(
            sorted(events or SEED_RECENT_ACTIVITY, key=lambda e: e.timestamp, reverse=True)
        )

    def _revenue_chart(self, record: RawMetricsRecord) -> tuple[RevenueSample, ...]:
        samples = [
            sample
            for item in as_list(first_present(record, *REVENUE_CHART_KEYS))
            if (sample := self._revenue_sample(item)) is not None
        ]
        return tuple(sorted(samples or SEED_REVENUE_CHART, key=lambda s: s.date))

    def _traffic_sources(self, record: RawMetricsRecord) -> tuple[TrafficSource, ...]:
        # Shares are relative to the named sources that survive
        raw_items = [
            data
            for item in as_list(first_present(record, *TRAFFIC_SOURCES_KEYS))
            if to_text((data := as_mapping(item)).get("source")) is not None
        ]
        total_visits = sum(max(to_int(item.get("visits")) or 0, 0) for item in raw_items)
        sources = [
            source
            for item in raw_items
            if (source := self._traffic_source(item, total_visits)) is not None
        ]
        return tuple(
            sorted(sources or SEED_TRAFFIC_SOURCES, key=lambda s: s.visits, reverse=True)
        )

    # -------------------------------------------------------------------------
    # Item readers (``None`` drops a malformed item)
    # -------------------------------------------------------------------------

    @staticmethod
    def _top_article(item: Any, position: int) -> TopArticle | None:
        data = as_mapping(item)
        title = to_text(data.get("title"))
        views = to_int(data.get("views"))
        if title is None or views is None:
            return None
        return TopArticle(
            id=to_text(data.get("id")) or str(position + 1),
            title=title,
            views=views,
            revenue=to_number(data.get("revenue")) or 0.0,
        )

    @staticmethod
    def _activity_event(item: Any, position: int) -> ActivityEvent | None:
        data = as_mapping(item)
        try:
            activity_type = ActivityType(data.get("type"))
        except ValueError:
            return None
        description = to_text(data.get("description")) or to_text(data.get("title"))
        timestamp = to_datetime(data.get("timestamp"))
        if description is None or timestamp is None:
            return None
        return ActivityEvent(
            id=to_text(data.get("id")) or str(position + 1),
            type=activity_type,
            description=description,
            timestamp=timestamp,
        )

    @staticmethod
    def _revenue_sample(item: Any) -> RevenueSample | None:
        data = as_mapping(item)
        day = to_date(data.get("date"))
        if day is None:
            return None
        return RevenueSample(
            date=day,
            revenue=to_number(data.get("revenue")) or 0.0,
            clicks=to_int(data.get("clicks")) or 0,
        )

    @staticmethod
    def _traffic_source(data: Mapping[str, Any], total_visits: int) -> TrafficSource | None:
        name = to_text(data.get("source"))
        if name is None:
            return None
        visits = max(to_int(data.get("visits")) or 0, 0)
        percentage = to_number(data.get("percentage"))
        if percentage is None:
            percentage = round(visits / total_visits * 100, 1) if total_visits else 0.0
        return TrafficSource(
            source=name,
            visits=visits,
            percentage=clamp_percentage(percentage),
        )


_default_normalizer = MetricsNormalizer()


def normalize(raw: Any = None) -> DashboardStatistics:
    """Normalize ``raw`` with the default field table."""
    return _default_normalizer.normalize(raw)
