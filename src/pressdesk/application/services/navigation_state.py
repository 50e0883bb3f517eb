"""Route-driven breadcrumb state.

The layout shell calls :meth:`NavigationState.on_route_changed` on every
navigation; the trail is recomputed from scratch each time.
"""

from __future__ import annotations

from pressdesk.domain.navigation import BreadcrumbEntry, derive_breadcrumbs


class NavigationState:
    """Holds the current route and its breadcrumb trail."""

    def __init__(self, path: str | None = None):
        self._path: str | None = None
        self._breadcrumbs: tuple[BreadcrumbEntry, ...] = ()
        if path is not None:
            self.on_route_changed(path)

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def breadcrumbs(self) -> tuple[BreadcrumbEntry, ...]:
        return self._breadcrumbs

    def on_route_changed(self, path: str | None) -> tuple[BreadcrumbEntry, ...]:
        """Store the new route and return its freshly derived trail."""
        self._path = path
        self._breadcrumbs = tuple(derive_breadcrumbs(path))
        return self._breadcrumbs
