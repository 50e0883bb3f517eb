"""Envelope and health schemas used by every router."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base for response models rendered with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapping every read endpoint payload."""

    data: DataT | None = Field(None, description="Endpoint payload")
    success: bool = Field(True, description="False when the request failed")
    message: str = Field("", description="Human-readable status message")


class ErrorResponse(BaseModel):
    """Envelope returned for failed requests."""

    data: None = None
    success: bool = False
    message: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": None,
                "success": False,
                "message": "Metrics source 'live' is unavailable: request timed out",
                "code": "METRICS_SOURCE_UNAVAILABLE",
            },
        },
    )


class HealthResponse(BaseModel):
    """Payload of the unversioned liveness check."""

    status: str = Field(..., description="Always 'healthy' while the process serves requests")
    version: str = Field(..., description="Running API version")
    metrics_source: str = Field(..., description="Configured metrics source mode")
