"""Query layer. Read-only operations for retrieving dashboard data."""

from pressdesk.application.queries.dashboard import (
    DashboardStatsQuery,
    RecentActivityQuery,
    RecentArticlesQuery,
    RevenueOverviewQuery,
)

__all__ = [
    "DashboardStatsQuery",
    "RecentActivityQuery",
    "RecentArticlesQuery",
    "RevenueOverviewQuery",
]
