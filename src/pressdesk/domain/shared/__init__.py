from pressdesk.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    MetricsSourceError,
    MetricsSourceUnavailableError,
)

__all__ = [
    "DomainException",
    "ErrorCode",
    "MetricsSourceError",
    "MetricsSourceUnavailableError",
]
