"""Dashboard DTOs for statistics, activity, articles and revenue."""

from pressdesk.application.dtos.dashboard.dashboard_dto import (
    ActivityEvent,
    ActivityFeed,
    ActivityItem,
    ActivityType,
    AffiliateShare,
    ArticleStatus,
    DashboardStatistics,
    RawMetricsRecord,
    RecentArticle,
    RecentArticles,
    RevenueChartPoint,
    RevenueOverview,
    RevenueSample,
    TopArticle,
    TopProduct,
    TrafficSource,
)

__all__ = [
    "ActivityEvent",
    "ActivityFeed",
    "ActivityItem",
    "ActivityType",
    "AffiliateShare",
    "ArticleStatus",
    "DashboardStatistics",
    "RawMetricsRecord",
    "RecentArticle",
    "RecentArticles",
    "RevenueChartPoint",
    "RevenueOverview",
    "RevenueSample",
    "TopArticle",
    "TopProduct",
    "TrafficSource",
]
