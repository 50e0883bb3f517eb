"""Dashboard queries (read-only) backed by a metrics source."""

from pressdesk.application.queries.dashboard.dashboard_stats_query import (
    DashboardStatsQuery,
)
from pressdesk.application.queries.dashboard.recent_activity_query import (
    RecentActivityQuery,
)
from pressdesk.application.queries.dashboard.recent_articles_query import (
    RecentArticlesQuery,
)
from pressdesk.application.queries.dashboard.revenue_overview_query import (
    RevenueOverviewQuery,
)

__all__ = [
    "DashboardStatsQuery",
    "RecentActivityQuery",
    "RecentArticlesQuery",
    "RevenueOverviewQuery",
]
