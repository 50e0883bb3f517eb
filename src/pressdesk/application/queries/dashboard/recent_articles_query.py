"""Build the recent articles list from raw source items."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pressdesk.application.dtos.dashboard import (
    ArticleStatus,
    RecentArticle,
    RecentArticles,
)
from pressdesk.application.ports.metrics import MetricsSource
from pressdesk.application.services.raw_values import (
    as_mapping,
    to_datetime,
    to_int,
    to_number,
    to_text,
)

_NEVER = datetime.min.replace(tzinfo=UTC)


def _to_recent_article(raw: Any) -> RecentArticle | None:
    data = as_mapping(raw)
    article_id = to_text(data.get("id"))
    title = to_text(data.get("title"))
    if article_id is None or title is None:
        return None
    try:
        status = ArticleStatus(data.get("status", ArticleStatus.DRAFT.value))
    except ValueError:
        status = ArticleStatus.DRAFT

    category = data.get("category")
    return RecentArticle(
        id=article_id,
        title=title,
        slug=to_text(data.get("slug")) or title.lower().replace(" ", "-"),
        status=status,
        author_name=to_text(as_mapping(data.get("author")).get("name")) or "",
        published_at=to_datetime(data.get("publishedAt") or data.get("published_at")),
        views=max(to_int(data.get("views")) or 0, 0),
        revenue=to_number(data.get("revenue")) or 0.0,
        category=to_text(as_mapping(category).get("name")) or to_text(category),
    )


class RecentArticlesQuery:
    """Return recent articles, most recently published first."""

    def __init__(self, metrics_source: MetricsSource):
        self._source = metrics_source

    @classmethod
    def from_source(cls, metrics_source: MetricsSource) -> RecentArticlesQuery:
        return cls(metrics_source=metrics_source)

    async def execute(
        self,
        limit: int | None = None,
        status: ArticleStatus | None = None,
    ) -> RecentArticles:
        raw_items = await self._source.fetch_recent_articles()
        articles = [
            article
            for raw in raw_items
            if (article := _to_recent_article(raw)) is not None
        ]
        if status is not None:
            articles = [a for a in articles if a.status == status]

        # Unpublished drafts sort after everything that has a date
        articles.sort(key=lambda a: a.published_at or _NEVER, reverse=True)
        total = len(articles)
        if limit is not None:
            articles = articles[:limit]
        return RecentArticles(articles=tuple(articles), total=total)
