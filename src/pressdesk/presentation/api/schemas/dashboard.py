"""Dashboard schemas for API response models.

Field names are rendered in camelCase (``totalArticles``) because the chart
and summary widgets consume them directly.
"""

import datetime as dt
from typing import Any

from pydantic import Field

from pressdesk.presentation.api.schemas.common import CamelModel


class TopArticleResponse(CamelModel):
    """Article ranked by views."""

    id: str = Field(..., description="Article identifier")
    title: str = Field(..., description="Article title")
    views: int = Field(..., description="Page views")
    revenue: float = Field(..., description="Affiliate revenue attributed to the article")


class ActivityEventResponse(CamelModel):
    """Compact activity entry in the statistics view."""

    id: str = Field(..., description="Event identifier")
    type: str = Field(..., description="Event kind (e.g. 'article_published')")
    description: str = Field(..., description="Human-readable event description")
    timestamp: dt.datetime = Field(..., description="When the event happened")


class RevenueSampleResponse(CamelModel):
    """Daily revenue sample."""

    date: dt.date
    revenue: float
    clicks: int


class TrafficSourceResponse(CamelModel):
    """Visits from one acquisition channel."""

    source: str = Field(..., description="Channel name (e.g. 'Google')")
    visits: int = Field(..., description="Visit count")
    percentage: float = Field(..., ge=0, le=100, description="Share of visits (0-100)")


class DashboardStatisticsResponse(CamelModel):
    """Aggregate statistics for the dashboard home page."""

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
    top_performing_articles: list[TopArticleResponse] = Field(
        ..., description="Articles sorted by views, highest first"
    )
    recent_activity: list[ActivityEventResponse] = Field(
        ..., description="Activity events, newest first"
    )
    revenue_chart: list[RevenueSampleResponse] = Field(
        ..., description="Daily revenue samples, oldest first"
    )
    traffic_sources: list[TrafficSourceResponse]

    model_config = {
        "json_schema_extra": {
            "example": {
                "totalArticles": 45,
                "publishedArticles": 45,
                "draftArticles": 0,
                "totalViews": 12543,
                "totalClicks": 3421,
                "totalRevenue": 1847.5,
                "monthlyRevenue": 1847.5,
                "totalComments": 234,
                "conversionRate": 3.7,
                "viewsChange": 27.0,
                "revenueChange": 29.0,
                "articlesChange": 18.4,
                "commentsChange": 15.2,
                "topPerformingArticles": [
                    {"id": "1", "title": "Best Laptops for Developers", "views": 523, "revenue": 125.5},
                ],
                "recentActivity": [
                    {
                        "id": "1",
                        "type": "article_published",
                        "description": 'Published "Best Laptops for Developers"',
                        "timestamp": "2025-06-06T12:00:00Z",
                    },
                ],
                "revenueChart": [
                    {"date": "2025-06-01", "revenue": 245.5, "clicks": 423},
                ],
                "trafficSources": [
                    {"source": "Google", "visits": 5234, "percentage": 42},
                ],
            }
        }
    }


class ActivityItemResponse(CamelModel):
    """Activity feed item."""

    id: str
    type: str
    title: str
    description: str
    timestamp: dt.datetime
    user_name: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)


class ActivityFeedResponse(CamelModel):
    """Activity feed page."""

    items: list[ActivityItemResponse]
    total: int = Field(..., description="Number of items before the limit")
    has_more: bool = Field(..., description="True when the limit cut items off")


class RecentArticleResponse(CamelModel):
    """Recently published or edited article."""

    id: str
    title: str
    slug: str
    status: str
    author_name: str
    published_at: dt.datetime | None = None
    views: int
    revenue: float
    category: str | None = None


class RecentArticlesResponse(CamelModel):
    """Recent articles list."""

    articles: list[RecentArticleResponse]
    total: int


class RevenueChartPointResponse(CamelModel):
    """Revenue sample including conversions."""

    date: dt.date
    revenue: float
    clicks: int
    conversions: int


class TopProductResponse(CamelModel):
    """Affiliate product ranked by revenue."""

    id: str
    name: str
    revenue: float
    clicks: int
    conversions: int


class AffiliateShareResponse(CamelModel):
    """Revenue share of one affiliate network."""

    network: str
    revenue: float
    percentage: float = Field(..., ge=0, le=100)


class RevenueOverviewResponse(CamelModel):
    """Revenue widget payload."""

    total_revenue: float
    chart_data: list[RevenueChartPointResponse] = Field(
        ..., description="Revenue samples, oldest first"
    )
    top_products: list[TopProductResponse] = Field(
        ..., description="Products sorted by revenue, highest first"
    )
    affiliate_breakdown: list[AffiliateShareResponse]
