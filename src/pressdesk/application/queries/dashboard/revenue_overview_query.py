"""Build the revenue overview from a raw revenue record."""

from __future__ import annotations

from typing import Any

from pressdesk.application.dtos.dashboard import (
    AffiliateShare,
    RevenueChartPoint,
    RevenueOverview,
    TopProduct,
)
from pressdesk.application.ports.metrics import MetricsSource
from pressdesk.application.services.chart_helpers import (
    Period,
    aggregate_by_period,
    clamp_percentage,
)
from pressdesk.application.services.raw_values import (
    as_list,
    as_mapping,
    first_present,
    to_date,
    to_int,
    to_number,
    to_text,
)


def _to_chart_point(raw: Any) -> RevenueChartPoint | None:
    data = as_mapping(raw)
    day = to_date(data.get("date"))
    if day is None:
        return None
    return RevenueChartPoint(
        date=day,
        revenue=to_number(data.get("revenue")) or 0.0,
        clicks=to_int(data.get("clicks")) or 0,
        conversions=to_int(data.get("conversions")) or 0,
    )


def _to_top_product(raw: Any, position: int) -> TopProduct | None:
    data = as_mapping(raw)
    name = to_text(data.get("name"))
    if name is None:
        return None
    return TopProduct(
        id=to_text(data.get("id")) or str(position + 1),
        name=name,
        revenue=to_number(data.get("revenue")) or 0.0,
        clicks=to_int(data.get("clicks")) or 0,
        conversions=to_int(data.get("conversions")) or 0,
    )


def _to_affiliate_share(raw: Any) -> AffiliateShare | None:
    data = as_mapping(raw)
    network = to_text(data.get("network"))
    if network is None:
        return None
    return AffiliateShare(
        network=network,
        revenue=to_number(data.get("revenue")) or 0.0,
        percentage=clamp_percentage(to_number(data.get("percentage")) or 0.0),
    )


def _aggregate_chart(
    points: list[RevenueChartPoint],
    period: Period,
) -> list[RevenueChartPoint]:
    """Average each chart series per period bucket."""
    revenue = aggregate_by_period(((p.date, p.revenue) for p in points), period)
    clicks = dict(aggregate_by_period(((p.date, p.clicks) for p in points), period))
    conversions = dict(
        aggregate_by_period(((p.date, p.conversions) for p in points), period)
    )
    return [
        RevenueChartPoint(
            date=bucket,
            revenue=round(value, 2),
            clicks=int(round(clicks[bucket])),
            conversions=int(round(conversions[bucket])),
        )
        for bucket, value in revenue
    ]


class RevenueOverviewQuery:
    """Return revenue totals, the daily chart and product/network rankings."""

    def __init__(self, metrics_source: MetricsSource):
        self._source = metrics_source

    @classmethod
    def from_source(cls, metrics_source: MetricsSource) -> RevenueOverviewQuery:
        return cls(metrics_source=metrics_source)

    async def execute(self, period: Period = "day") -> RevenueOverview:
        record = as_mapping(await self._source.fetch_revenue())

        chart = sorted(
            (
                point
                for raw in as_list(first_present(record, "chartData", "chart_data"))
                if (point := _to_chart_point(raw)) is not None
            ),
            key=lambda p: p.date,
        )
        if period != "day":
            chart = _aggregate_chart(chart, period)

        products = sorted(
            (
                product
                for position, raw in enumerate(
                    as_list(first_present(record, "topProducts", "top_products"))
                )
                if (product := _to_top_product(raw, position)) is not None
            ),
            key=lambda p: p.revenue,
            reverse=True,
        )
        affiliates = [
            share
            for raw in as_list(
                first_present(record, "affiliateBreakdown", "affiliate_breakdown")
            )
            if (share := _to_affiliate_share(raw)) is not None
        ]

        total = to_number(first_present(record, "totalRevenue", "total_revenue"))
        if total is None:
            total = sum(point.revenue for point in chart)

        return RevenueOverview(
            total_revenue=total,
            chart_data=tuple(chart),
            top_products=tuple(products),
            affiliate_breakdown=tuple(affiliates),
        )
