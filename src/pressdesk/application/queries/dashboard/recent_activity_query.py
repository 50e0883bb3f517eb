"""Build the activity feed from raw source items."""

from __future__ import annotations

from typing import Any

from pressdesk.application.dtos.dashboard import (
    ActivityFeed,
    ActivityItem,
    ActivityType,
)
from pressdesk.application.ports.metrics import MetricsSource
from pressdesk.application.services.raw_values import (
    as_mapping,
    to_datetime,
    to_text,
)


def _to_activity_item(raw: Any, position: int) -> ActivityItem | None:
    data = as_mapping(raw)
    try:
        activity_type = ActivityType(data.get("type"))
    except ValueError:
        return None
    timestamp = to_datetime(data.get("timestamp"))
    if timestamp is None:
        return None

    title = to_text(data.get("title")) or activity_type.value.replace("_", " ").capitalize()
    return ActivityItem(
        id=to_text(data.get("id")) or str(position + 1),
        type=activity_type,
        title=title,
        description=to_text(data.get("description")) or title,
        timestamp=timestamp,
        user_name=to_text(as_mapping(data.get("user")).get("name")) or "",
        metadata=dict(as_mapping(data.get("metadata"))),
    )


class RecentActivityQuery:
    """Return activity items newest first, optionally limited."""

    def __init__(self, metrics_source: MetricsSource):
        self._source = metrics_source

    @classmethod
    def from_source(cls, metrics_source: MetricsSource) -> RecentActivityQuery:
        return cls(metrics_source=metrics_source)

    async def execute(
        self,
        limit: int | None = None,
        types: list[ActivityType] | None = None,
    ) -> ActivityFeed:
        raw_items = await self._source.fetch_activity()
        items = [
            item
            for position, raw in enumerate(raw_items)
            if (item := _to_activity_item(raw, position)) is not None
        ]
        if types:
            items = [item for item in items if item.type in types]
        items.sort(key=lambda item: item.timestamp, reverse=True)

        total = len(items)
        if limit is not None:
            items = items[:limit]
        return ActivityFeed(
            items=tuple(items),
            total=total,
            has_more=len(items) < total,
        )
