"""Dashboard read models for chart and summary widgets.

These DTOs are the canonical, UI-ready shapes produced from whatever a
metrics source returns. They are immutable and rebuilt on every request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

# Untyped record as delivered by a metrics source (mock generator or live
# backend). Any key may be missing.
RawMetricsRecord = Mapping[str, Any]


class ActivityType(str, Enum):
    """Kinds of events shown in the activity feed."""

    ARTICLE_PUBLISHED = "article_published"
    COMMENT_ADDED = "comment_added"
    REVENUE_EARNED = "revenue_earned"
    USER_REGISTERED = "user_registered"


@dataclass(frozen=True)
class TopArticle:
    """Article ranked by traffic."""

    id: str
    title: str
    views: int
    revenue: float


@dataclass(frozen=True)
class ActivityEvent:
    """Compact activity entry embedded in the statistics view."""

    id: str
    type: ActivityType
    description: str
    timestamp: datetime


@dataclass(frozen=True)
class RevenueSample:
    """Daily revenue/click sample for the revenue chart."""

    date: date
    revenue: float
    clicks: int


@dataclass(frozen=True)
class TrafficSource:
    """Share of visits coming from one acquisition channel."""

    source: str
    visits: int
    percentage: float  # 0-100 scale


@dataclass(frozen=True)
class DashboardStatistics:
    """Canonical dashboard statistics view model.

    Invariants:
    - every numeric field is finite
    - ``top_performing_articles`` is ordered by descending views
    - ``recent_activity`` is ordered newest first
    - ``revenue_chart`` is ordered by ascending date
    - each ``traffic_sources`` percentage lies within [0, 100]
    """

    total_articles: int
    published_articles: int
    draft_articles: int
    total_views: int
    total_clicks: int
    total_revenue: float
    monthly_revenue: float
    total_comments: int
    conversion_rate: float
    views_change: float
    revenue_change: float
    articles_change: float
    comments_change: float
    top_performing_articles: tuple[TopArticle, ...]
    recent_activity: tuple[ActivityEvent, ...]
    revenue_chart: tuple[RevenueSample, ...]
    traffic_sources: tuple[TrafficSource, ...]


# -----------------------------------------------------------------------------
# Feed read models (activity, recent articles, revenue overview)
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ActivityItem:
    """Full activity feed item.

    ``metadata`` is copied into a read-only view on construction.
    """

    id: str
    type: ActivityType
    title: str
    description: str
    timestamp: datetime
    user_name: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))


@dataclass(frozen=True)
class ActivityFeed:
    """Activity feed page, newest first."""

    items: tuple[ActivityItem, ...]
    total: int
    has_more: bool


class ArticleStatus(str, Enum):
    """Publication status of an article."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


@dataclass(frozen=True)
class RecentArticle:
    """Recently published or edited article."""

    id: str
    title: str
    slug: str
    status: ArticleStatus
    author_name: str
    published_at: datetime | None
    views: int
    revenue: float
    category: str | None = None


@dataclass(frozen=True)
class RecentArticles:
    """Recent articles list."""

    articles: tuple[RecentArticle, ...]
    total: int


@dataclass(frozen=True)
class RevenueChartPoint:
    """Daily revenue sample including conversions."""

    date: date
    revenue: float
    clicks: int
    conversions: int


@dataclass(frozen=True)
class TopProduct:
    """Affiliate product ranked by revenue."""

    id: str
    name: str
    revenue: float
    clicks: int
    conversions: int


@dataclass(frozen=True)
class AffiliateShare:
    """Revenue share of one affiliate network."""

    network: str
    revenue: float
    percentage: float  # 0-100 scale


@dataclass(frozen=True)
class RevenueOverview:
    """Revenue overview for the revenue widget.

    ``chart_data`` is ordered by ascending date, ``top_products`` by
    descending revenue.
    """

    total_revenue: float
    chart_data: tuple[RevenueChartPoint, ...]
    top_products: tuple[TopProduct, ...]
    affiliate_breakdown: tuple[AffiliateShare, ...]
