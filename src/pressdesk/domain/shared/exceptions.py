"""Error codes and the exception hierarchy of the dashboard service.

Breadcrumb derivation and metrics normalization never raise. These
exceptions describe failures where data enters the service, and the API
layer turns each one into an error envelope.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients; keep values stable."""

    # Metrics source (502/503)
    METRICS_SOURCE_ERROR = "METRICS_SOURCE_ERROR"
    METRICS_SOURCE_UNAVAILABLE = "METRICS_SOURCE_UNAVAILABLE"
    METRICS_SOURCE_REJECTED = "METRICS_SOURCE_REJECTED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of the service's own exceptions.

    Attributes
    ----------
    message
        Text shown to API clients
    code
        :class:`ErrorCode` for client-side branching
    details
        Extra context for logs only
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class MetricsSourceError(DomainException):
    """Base class for failures of a metrics source."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.METRICS_SOURCE_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class MetricsSourceUnavailableError(MetricsSourceError):
    """Raised when a metrics source cannot deliver a usable record.

    Covers connection failures, timeouts, HTTP error statuses, undecodable
    bodies and envelopes reporting ``success: false``.
    """

    def __init__(
        self,
        source: str,
        reason: str,
        code: ErrorCode = ErrorCode.METRICS_SOURCE_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.source = source
        self.reason = reason
        super().__init__(
            f"Metrics source '{source}' is unavailable: {reason}",
            code,
            details,
        )
