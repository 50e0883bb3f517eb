"""Breadcrumb trail derivation from route paths.

A route such as ``/dashboard/revenue/links`` becomes one entry per
non-empty segment, each linking to the path prefix that ends with it::

    Dashboard -> /dashboard
    Revenue   -> /dashboard/revenue
    Links     -> /dashboard/revenue/links   (is_last)

Derivation is pure: no I/O, no shared state, same path in, same trail out.
Query strings and fragments are not understood here; callers strip them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BreadcrumbEntry:
    """Single navigable label in a breadcrumb trail."""

    label: str
    href: str
    is_last: bool


def split_route_path(path: str | None) -> list[str]:
    """Split a route path into its non-empty segments."""
    if not path:
        return []
    return [segment for segment in path.split("/") if segment]


def segment_label(segment: str) -> str:
    """Turn a URL segment into a display label.

    Hyphens become spaces and only the very first character is upper-cased,
    so ``ai-assistant`` reads ``Ai assistant``.
    """
    text = segment.replace("-", " ")
    return text[:1].upper() + text[1:]


def derive_breadcrumbs(path: str | None) -> list[BreadcrumbEntry]:
    """Derive the breadcrumb trail for a route path.

    Parameters
    ----------
    path
        Absolute route path. ``None`` and ``""`` yield an empty trail.

    Returns
    -------
    Entries in left-to-right segment order; only the final one has
    ``is_last`` set.
    """
    segments = split_route_path(path)
    last_index = len(segments) - 1
    return [
        BreadcrumbEntry(
            label=segment_label(segment),
            href="/" + "/".join(segments[: index + 1]),
            is_last=index == last_index,
        )
        for index, segment in enumerate(segments)
    ]
