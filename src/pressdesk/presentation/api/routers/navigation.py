"""Navigation router for breadcrumb trails."""

from typing import Annotated

from fastapi import APIRouter, Query

from pressdesk.domain.navigation import derive_breadcrumbs
from pressdesk.presentation.api.schemas.common import ApiResponse
from pressdesk.presentation.api.schemas.navigation import BreadcrumbResponse

router = APIRouter()


def _strip_query(path: str) -> str:
    """Drop any ``?query`` or ``#fragment`` part of a route."""
    return path.split("?", 1)[0].split("#", 1)[0]


@router.get(
    "/breadcrumbs",
    summary="Get breadcrumb trail",
    responses={
        200: {"description": "Breadcrumb entries, root first"},
    },
)
async def get_breadcrumbs(
    path: Annotated[
        str,
        Query(description="Current route path, e.g. /dashboard/revenue/links"),
    ] = "",
) -> ApiResponse[list[BreadcrumbResponse]]:
    """
    Derive the breadcrumb trail for a route.

    One entry per path segment; hyphens become spaces and the first letter
    is capitalized. An empty path yields an empty trail.
    """
    trail = derive_breadcrumbs(_strip_query(path))

    return ApiResponse(
        data=[
            BreadcrumbResponse(label=entry.label, href=entry.href, is_last=entry.is_last)
            for entry in trail
        ],
    )
