"""Navigation concepts (breadcrumb trails)."""

from pressdesk.domain.navigation.breadcrumbs import (
    BreadcrumbEntry,
    derive_breadcrumbs,
    segment_label,
    split_route_path,
)

__all__ = [
    "BreadcrumbEntry",
    "derive_breadcrumbs",
    "segment_label",
    "split_route_path",
]
