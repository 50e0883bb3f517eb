"""Dashboard router for aggregate statistics and widget feeds."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Query

from pressdesk.application.dtos.dashboard import (
    ActivityItem,
    ActivityType,
    ArticleStatus,
    DashboardStatistics,
    RecentArticle,
    RevenueOverview,
)
from pressdesk.application.queries import (
    DashboardStatsQuery,
    RecentActivityQuery,
    RecentArticlesQuery,
    RevenueOverviewQuery,
)
from pressdesk.presentation.api.dependencies import MetricsSourceDep
from pressdesk.presentation.api.schemas.common import ApiResponse, ErrorResponse
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

logger = logging.getLogger(__name__)

router = APIRouter()

SOURCE_FAILURE_RESPONSES: dict = {
    502: {"model": ErrorResponse, "description": "Metrics backend rejected the request"},
    503: {"model": ErrorResponse, "description": "Metrics backend unavailable"},
}

LimitFilter = Annotated[
    int | None,
    Query(ge=1, le=100, description="Maximum number of items to return"),
]


def _source_message(source_name: str) -> str:
    if source_name == "mock":
        return "Mock data"
    if source_name == "none":
        return "No metrics backend configured, showing defaults"
    return "OK"


def _statistics_to_response(stats: DashboardStatistics) -> DashboardStatisticsResponse:
    """Convert the statistics view model to its API schema."""
    return DashboardStatisticsResponse(
        total_articles=stats.total_articles,
        published_articles=stats.published_articles,
        draft_articles=stats.draft_articles,
        total_views=stats.total_views,
        total_clicks=stats.total_clicks,
        total_revenue=stats.total_revenue,
        monthly_revenue=stats.monthly_revenue,
        total_comments=stats.total_comments,
        conversion_rate=stats.conversion_rate,
        views_change=stats.views_change,
        revenue_change=stats.revenue_change,
        articles_change=stats.articles_change,
        comments_change=stats.comments_change,
        top_performing_articles=[
            TopArticleResponse(
                id=article.id,
                title=article.title,
                views=article.views,
                revenue=article.revenue,
            )
            for article in stats.top_performing_articles
        ],
        recent_activity=[
            ActivityEventResponse(
                id=event.id,
                type=event.type.value,
                description=event.description,
                timestamp=event.timestamp,
            )
            for event in stats.recent_activity
        ],
        revenue_chart=[
            RevenueSampleResponse(
                date=sample.date,
                revenue=sample.revenue,
                clicks=sample.clicks,
            )
            for sample in stats.revenue_chart
        ],
        traffic_sources=[
            TrafficSourceResponse(
                source=source.source,
                visits=source.visits,
                percentage=source.percentage,
            )
            for source in stats.traffic_sources
        ],
    )


def _activity_item_to_response(item: ActivityItem) -> ActivityItemResponse:
    return ActivityItemResponse(
        id=item.id,
        type=item.type.value,
        title=item.title,
        description=item.description,
        timestamp=item.timestamp,
        user_name=item.user_name,
        metadata=dict(item.metadata),
    )


def _article_to_response(article: RecentArticle) -> RecentArticleResponse:
    return RecentArticleResponse(
        id=article.id,
        title=article.title,
        slug=article.slug,
        status=article.status.value,
        author_name=article.author_name,
        published_at=article.published_at,
        views=article.views,
        revenue=article.revenue,
        category=article.category,
    )


def _revenue_to_response(overview: RevenueOverview) -> RevenueOverviewResponse:
    return RevenueOverviewResponse(
        total_revenue=overview.total_revenue,
        chart_data=[
            RevenueChartPointResponse(
                date=point.date,
                revenue=point.revenue,
                clicks=point.clicks,
                conversions=point.conversions,
            )
            for point in overview.chart_data
        ],
        top_products=[
            TopProductResponse(
                id=product.id,
                name=product.name,
                revenue=product.revenue,
                clicks=product.clicks,
                conversions=product.conversions,
            )
            for product in overview.top_products
        ],
        affiliate_breakdown=[
            AffiliateShareResponse(
                network=share.network,
                revenue=share.revenue,
                percentage=share.percentage,
            )
            for share in overview.affiliate_breakdown
        ],
    )


@router.get(
    "/stats",
    summary="Get dashboard statistics",
    responses={
        200: {"description": "Normalized dashboard statistics"},
        **SOURCE_FAILURE_RESPONSES,
    },
)
async def get_dashboard_stats(
    source: MetricsSourceDep,
) -> ApiResponse[DashboardStatisticsResponse]:
    """
    Get aggregate statistics for the dashboard home page.

    Includes:
    - Article, traffic, revenue and engagement totals
    - Percentage change per tracked metric
    - Top performing articles and recent activity
    - Daily revenue chart and traffic source breakdown

    Missing upstream values are replaced by documented fallbacks, so every
    field is always present.
    """
    logger.info("Dashboard stats requested (source=%s)", source.name)

    stats = await DashboardStatsQuery.from_source(source).execute()

    return ApiResponse(
        data=_statistics_to_response(stats),
        message=_source_message(source.name),
    )


@router.get(
    "/activity",
    summary="Get recent activity",
    responses={
        200: {"description": "Activity feed, newest first"},
        **SOURCE_FAILURE_RESPONSES,
    },
)
async def get_activity(
    source: MetricsSourceDep,
    limit: LimitFilter = None,
    types: Annotated[
        list[ActivityType] | None,
        Query(description="Only include these event types"),
    ] = None,
) -> ApiResponse[ActivityFeedResponse]:
    """Get the activity feed (publications, comments, earnings, sign-ups)."""
    feed = await RecentActivityQuery.from_source(source).execute(
        limit=limit,
        types=types,
    )

    return ApiResponse(
        data=ActivityFeedResponse(
            items=[_activity_item_to_response(item) for item in feed.items],
            total=feed.total,
            has_more=feed.has_more,
        ),
        message=_source_message(source.name),
    )


@router.get(
    "/articles",
    summary="Get recent articles",
    responses={
        200: {"description": "Recent articles, most recently published first"},
        **SOURCE_FAILURE_RESPONSES,
    },
)
async def get_recent_articles(
    source: MetricsSourceDep,
    limit: LimitFilter = None,
    status: Annotated[
        ArticleStatus | None,
        Query(description="Only include articles with this status"),
    ] = None,
) -> ApiResponse[RecentArticlesResponse]:
    """Get recently published or edited articles."""
    result = await RecentArticlesQuery.from_source(source).execute(
        limit=limit,
        status=status,
    )

    return ApiResponse(
        data=RecentArticlesResponse(
            articles=[_article_to_response(article) for article in result.articles],
            total=result.total,
        ),
        message=_source_message(source.name),
    )


@router.get(
    "/revenue",
    summary="Get revenue overview",
    responses={
        200: {"description": "Revenue totals, chart and rankings"},
        **SOURCE_FAILURE_RESPONSES,
    },
)
async def get_revenue(
    source: MetricsSourceDep,
    period: Annotated[
        Literal["day", "week", "month"],
        Query(description="Chart bucket size; week/month average the daily samples"),
    ] = "day",
) -> ApiResponse[RevenueOverviewResponse]:
    """
    Get the revenue overview.

    Chart data is ordered oldest first; top products highest revenue first.
    """
    overview = await RevenueOverviewQuery.from_source(source).execute(period=period)

    return ApiResponse(
        data=_revenue_to_response(overview),
        message=_source_message(source.name),
    )
