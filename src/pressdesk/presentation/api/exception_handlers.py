"""Map domain errors onto HTTP responses.

Failures keep the envelope shape of successful reads, so the dashboard
can show an error state with the same parser::

    {"data": null, "success": false, "message": "...", "code": "METRICS_SOURCE_UNAVAILABLE"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pressdesk.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    MetricsSourceError,
)
from pressdesk.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


STATUS_BY_ERROR_CODE: dict[ErrorCode, int] = {
    # Backend answered but refused the request
    ErrorCode.METRICS_SOURCE_REJECTED: status.HTTP_502_BAD_GATEWAY,
    # Backend unreachable, timed out, or sent something unreadable
    ErrorCode.METRICS_SOURCE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.METRICS_SOURCE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _status_for(exc: DomainException) -> int:
    status_code = STATUS_BY_ERROR_CODE.get(exc.code)
    if status_code is not None:
        return status_code
    if isinstance(exc, MetricsSourceError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_400_BAD_REQUEST


def _error_response(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, code=code.value).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all handlers on ``app``."""

    @app.exception_handler(MetricsSourceError)
    async def handle_metrics_source_error(
        request: Request,
        exc: MetricsSourceError,
    ) -> JSONResponse:
        logger.warning(
            "Metrics source failed for %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error_response(_status_for(exc), exc.message, exc.code)

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning(
            "Domain error for %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error_response(_status_for(exc), exc.message, exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error for %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
