"""Pydantic schemas for API response models."""

from pressdesk.presentation.api.schemas.common import (
    ApiResponse,
    CamelModel,
    ErrorResponse,
    HealthResponse,
)
from pressdesk.presentation.api.schemas.dashboard import (
    ActivityEventResponse,
    ActivityFeedResponse,
    ActivityItemResponse,
    AffiliateShareResponse,
    DashboardStatisticsResponse,
    RecentArticleResponse,
    RecentArticlesResponse,
    RevenueChartPointResponse,
    RevenueOverviewResponse,
    RevenueSampleResponse,
    TopArticleResponse,
    TopProductResponse,
    TrafficSourceResponse,
)
from pressdesk.presentation.api.schemas.navigation import BreadcrumbResponse

__all__ = [
    # Common
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    # Dashboard
    "ActivityEventResponse",
    "ActivityFeedResponse",
    "ActivityItemResponse",
    "AffiliateShareResponse",
    "DashboardStatisticsResponse",
    "RecentArticleResponse",
    "RecentArticlesResponse",
    "RevenueChartPointResponse",
    "RevenueOverviewResponse",
    "RevenueSampleResponse",
    "TopArticleResponse",
    "TopProductResponse",
    "TrafficSourceResponse",
    # Navigation
    "BreadcrumbResponse",
]
