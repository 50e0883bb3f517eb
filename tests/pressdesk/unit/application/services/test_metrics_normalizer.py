"""Unit tests for the metrics normalizer."""

import copy
import dataclasses
import math
from datetime import UTC, date, datetime

import pytest

from pressdesk.application.dtos.dashboard import ActivityType, DashboardStatistics
from pressdesk.application.services import (
    FIELD_DEFAULTS,
    FieldDefault,
    MetricsNormalizer,
    normalize,
)
from pressdesk.application.services.metrics_normalizer import (
    SEED_RECENT_ACTIVITY,
    SEED_REVENUE_CHART,
    SEED_TOP_ARTICLES,
    SEED_TRAFFIC_SOURCES,
)

SCALAR_FIELDS = [
    f.name
    for f in dataclasses.fields(DashboardStatistics)
    if f.name in FIELD_DEFAULTS
]


class TestEmptyInput:
    def test_every_scalar_uses_its_fallback(self):
        stats = normalize({})

        assert stats.total_articles == 45
        assert stats.published_articles == 45
        assert stats.draft_articles == 0
        assert stats.total_views == 12543
        assert stats.total_clicks == 3421
        assert stats.total_revenue == 1847.50
        assert stats.monthly_revenue == 1847.50
        assert stats.total_comments == 234
        assert stats.conversion_rate == 3.7
        assert stats.views_change == 27.0
        assert stats.revenue_change == 29.0
        assert stats.articles_change == 18.4
        assert stats.comments_change == 15.2

    def test_every_numeric_field_is_finite(self):
        stats = normalize({})

        assert len(SCALAR_FIELDS) == 13
        for name in SCALAR_FIELDS:
            value = getattr(stats, name)
            assert isinstance(value, (int, float)), name
            assert math.isfinite(value), name

    def test_lists_fall_back_to_seed_lists(self):
        stats = normalize({})

        assert stats.top_performing_articles == SEED_TOP_ARTICLES
        assert stats.recent_activity == SEED_RECENT_ACTIVITY
        assert stats.revenue_chart == SEED_REVENUE_CHART
        assert stats.traffic_sources == SEED_TRAFFIC_SOURCES
        assert all(
            len(lst) > 0
            for lst in (
                stats.top_performing_articles,
                stats.recent_activity,
                stats.revenue_chart,
                stats.traffic_sources,
            )
        )

    @pytest.mark.parametrize("raw", [None, [], [1, 2], "garbage", 42])
    def test_non_mapping_input_behaves_like_empty(self, raw):
        assert normalize(raw) == normalize({})


class TestSourceValues:
    def test_typical_record(self):
        stats = normalize(
            {
                "current": {
                    "articles": 45,
                    "views": 12543,
                    "revenue": 1847.50,
                    "clicks": 3421,
                },
                "growth": {"views": 27.0, "revenue": 29.0, "articles": 18.4},
            }
        )

        assert stats.total_articles == 45
        assert stats.total_views == 12543
        assert stats.total_revenue == 1847.50
        assert stats.views_change == 27.0

    def test_source_values_override_fallbacks(self):
        stats = normalize(
            {
                "current": {
                    "articles": 12,
                    "drafts": 3,
                    "views": 800,
                    "revenue": 99.95,
                    "clicks": 40,
                },
                "growth": {"views": -4.5, "revenue": 1.25, "articles": 50},
            }
        )

        assert stats.total_articles == 12
        assert stats.published_articles == 12
        assert stats.draft_articles == 3
        assert stats.total_views == 800
        assert stats.total_clicks == 40
        assert stats.total_revenue == 99.95
        assert stats.monthly_revenue == 99.95
        assert stats.views_change == -4.5
        assert stats.revenue_change == 1.25
        assert stats.articles_change == 50.0

    def test_fields_without_a_source_key_always_use_fallback(self):
        stats = normalize(
            {"current": {"comments": 999, "conversionRate": 50}, "comments": 1}
        )

        assert stats.total_comments == 234
        assert stats.conversion_rate == 3.7
        assert stats.comments_change == 15.2

    def test_integral_fields_are_rounded(self):
        stats = normalize({"current": {"views": 10.6, "articles": 4.2}})

        assert stats.total_views == 11
        assert stats.total_articles == 4
        assert isinstance(stats.total_views, int)

    def test_numeric_strings_are_accepted(self):
        stats = normalize({"current": {"revenue": "99.90", "views": " 120 "}})

        assert stats.total_revenue == pytest.approx(99.9)
        assert stats.total_views == 120


class TestZeroValues:
    """A present zero is a real measurement, not a missing value."""

    def test_zero_values_are_kept(self):
        stats = normalize(
            {
                "current": {"articles": 0, "views": 0, "revenue": 0, "clicks": 0},
                "growth": {"views": 0, "revenue": 0.0, "articles": 0},
            }
        )

        assert stats.total_articles == 0
        assert stats.published_articles == 0
        assert stats.total_views == 0
        assert stats.total_clicks == 0
        assert stats.total_revenue == 0.0
        assert stats.monthly_revenue == 0.0
        assert stats.views_change == 0.0
        assert stats.revenue_change == 0.0
        assert stats.articles_change == 0.0

    def test_absent_value_next_to_zero_still_falls_back(self):
        stats = normalize({"current": {"views": 0}})

        assert stats.total_views == 0
        assert stats.total_articles == 45


class TestUnreadableValues:
    @pytest.mark.parametrize(
        "value",
        [None, float("nan"), float("inf"), float("-inf"), True, False, "abc", "", [], {}],
    )
    def test_unreadable_value_falls_back(self, value):
        stats = normalize({"current": {"views": value}})

        assert stats.total_views == 12543

    def test_non_mapping_group_falls_back(self):
        stats = normalize({"current": [1, 2, 3], "growth": "up"})

        assert stats.total_articles == 45
        assert stats.views_change == 27.0


class TestDerivedGrowth:
    def test_growth_derived_from_periods_when_missing(self):
        stats = normalize(
            {
                "current": {"views": 120, "revenue": 150.0, "articles": 9},
                "previous": {"views": 100, "revenue": 200.0, "articles": 9},
            }
        )

        assert stats.views_change == 20.0
        assert stats.revenue_change == -25.0
        assert stats.articles_change == 0.0

    def test_derived_growth_is_rounded_to_one_decimal(self):
        stats = normalize({"current": {"views": 2}, "previous": {"views": 3}})

        assert stats.views_change == -33.3

    def test_growth_from_zero_baseline(self):
        stats = normalize({"current": {"views": 5}, "previous": {"views": 0}})

        assert stats.views_change == 100.0

    def test_explicit_growth_wins(self):
        stats = normalize(
            {
                "current": {"views": 120},
                "previous": {"views": 100},
                "growth": {"views": 5.5},
            }
        )

        assert stats.views_change == 5.5

    def test_incomplete_periods_fall_back(self):
        stats = normalize({"current": {"views": 120}})

        assert stats.views_change == 27.0


class TestTopArticles:
    def test_sorted_by_views_descending(self):
        stats = normalize(
            {
                "topPerformingArticles": [
                    {"title": "Low", "views": 10, "revenue": 1},
                    {"title": "High", "views": 300},
                    {"id": "m", "title": "Mid", "views": 50, "revenue": "2.5"},
                ]
            }
        )

        articles = stats.top_performing_articles
        assert [a.title for a in articles] == ["High", "Mid", "Low"]
        assert [a.id for a in articles] == ["2", "m", "1"]
        assert articles[0].revenue == 0.0
        assert articles[1].revenue == 2.5

    def test_malformed_items_are_dropped(self):
        stats = normalize(
            {
                "top_performing_articles": [
                    {"title": "Valid", "views": 1},
                    {"title": "No views"},
                    {"views": 100},
                    "not an article",
                ]
            }
        )

        assert [a.title for a in stats.top_performing_articles] == ["Valid"]

    def test_only_malformed_items_fall_back_to_seed(self):
        stats = normalize({"topPerformingArticles": [{"title": ""}, None]})

        assert stats.top_performing_articles == SEED_TOP_ARTICLES


class TestRecentActivity:
    def test_sorted_newest_first(self):
        stats = normalize(
            {
                "recentActivity": [
                    {
                        "type": "comment_added",
                        "description": "Older",
                        "timestamp": "2025-06-01T08:00:00+00:00",
                    },
                    {
                        "type": "article_published",
                        "description": "Newer",
                        "timestamp": "2025-06-02T08:00:00Z",
                    },
                ]
            }
        )

        events = stats.recent_activity
        assert [e.description for e in events] == ["Newer", "Older"]
        assert events[0].type is ActivityType.ARTICLE_PUBLISHED

    def test_naive_timestamp_is_utc(self):
        stats = normalize(
            {
                "recentActivity": [
                    {
                        "type": "user_registered",
                        "title": "Signup",
                        "timestamp": "2025-06-01T08:00:00",
                    }
                ]
            }
        )

        event = stats.recent_activity[0]
        assert event.description == "Signup"
        assert event.timestamp == datetime(2025, 6, 1, 8, 0, tzinfo=UTC)

    def test_unknown_type_is_dropped(self):
        stats = normalize(
            {
                "recentActivity": [
                    {"type": "unknown", "description": "x", "timestamp": "2025-06-01"},
                ]
            }
        )

        assert stats.recent_activity == SEED_RECENT_ACTIVITY


class TestRevenueChart:
    def test_sorted_by_ascending_date(self):
        stats = normalize(
            {
                "chartData": [
                    {"date": "2025-06-03", "revenue": 3, "clicks": 30},
                    {"date": "2025-06-01T10:00:00Z", "revenue": 1, "clicks": 10},
                    {"date": "2025-06-02", "revenue": 2},
                    {"date": "not a date", "revenue": 4},
                ]
            }
        )

        chart = stats.revenue_chart
        assert [s.date for s in chart] == [
            date(2025, 6, 1),
            date(2025, 6, 2),
            date(2025, 6, 3),
        ]
        assert chart[1].clicks == 0

    def test_seed_chart_is_ascending(self):
        dates = [s.date for s in normalize({}).revenue_chart]
        assert dates == sorted(dates)


class TestTrafficSources:
    def test_sorted_and_clamped(self):
        stats = normalize(
            {
                "trafficSources": [
                    {"source": "Direct", "visits": 100, "percentage": 150},
                    {"source": "Google", "visits": 300, "percentage": -5},
                ]
            }
        )

        sources = stats.traffic_sources
        assert [s.source for s in sources] == ["Google", "Direct"]
        assert sources[0].percentage == 0.0
        assert sources[1].percentage == 100.0

    def test_missing_percentage_derived_from_visits(self):
        stats = normalize(
            {
                "traffic_sources": [
                    {"source": "A", "visits": 1},
                    {"source": "B", "visits": 3},
                ]
            }
        )

        assert [(s.source, s.percentage) for s in stats.traffic_sources] == [
            ("B", 75.0),
            ("A", 25.0),
        ]

    def test_nameless_items_do_not_count_towards_shares(self):
        stats = normalize(
            {
                "trafficSources": [
                    {"source": "A", "visits": 50},
                    {"visits": 50},
                    {"source": "", "visits": 100},
                ]
            }
        )

        assert [(s.source, s.percentage) for s in stats.traffic_sources] == [
            ("A", 100.0),
        ]

    def test_percentages_need_not_sum_to_100(self):
        stats = normalize(
            {
                "trafficSources": [
                    {"source": "A", "visits": 10, "percentage": 40},
                    {"source": "B", "visits": 5, "percentage": 40},
                ]
            }
        )

        assert sum(s.percentage for s in stats.traffic_sources) == 80.0

    def test_every_percentage_in_range(self):
        for source in normalize({}).traffic_sources:
            assert 0 <= source.percentage <= 100


class TestPurity:
    RECORD = {
        "current": {"articles": 3, "views": 10},
        "previous": {"views": 5},
        "topPerformingArticles": [
            {"title": "B", "views": 1},
            {"title": "A", "views": 2},
        ],
        "recentActivity": [
            {
                "type": "comment_added",
                "description": "c",
                "timestamp": "2025-06-01T00:00:00Z",
            }
        ],
    }

    def test_idempotent(self):
        assert normalize(self.RECORD) == normalize(self.RECORD)
        assert normalize({}) == normalize({})

    def test_input_is_not_mutated(self):
        record = copy.deepcopy(self.RECORD)

        normalize(record)

        assert record == self.RECORD

    def test_result_is_immutable(self):
        stats = normalize({})

        with pytest.raises(dataclasses.FrozenInstanceError):
            stats.total_views = 1  # type: ignore[misc]


class TestCustomDefaults:
    def test_partial_table_is_merged_over_defaults(self):
        normalizer = MetricsNormalizer(
            {"total_comments": FieldDefault("current", "comments", 0, integral=True)}
        )

        stats = normalizer.normalize({"current": {"comments": 7}})

        assert stats.total_comments == 7
        assert stats.total_views == 12543

    def test_custom_fallback(self):
        normalizer = MetricsNormalizer(
            {"conversion_rate": FieldDefault(None, None, 1.5)}
        )

        assert normalizer.normalize({}).conversion_rate == 1.5
