"""Navigation schemas for API response models."""

from pydantic import Field

from pressdesk.presentation.api.schemas.common import CamelModel


class BreadcrumbResponse(CamelModel):
    """One entry of a breadcrumb trail."""

    label: str = Field(..., description="Display label (e.g. 'Ai assistant')")
    href: str = Field(..., description="Path prefix ending with this segment")
    is_last: bool = Field(..., description="True only for the current page")

    model_config = {
        "json_schema_extra": {
            "example": {"label": "Revenue", "href": "/dashboard/revenue", "isLast": False},
        }
    }
