"""HTTP metrics source for the production content backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from pressdesk.application.dtos.dashboard import RawMetricsRecord
from pressdesk.application.services.raw_values import as_list, as_mapping
from pressdesk.domain.shared import ErrorCode, MetricsSourceUnavailableError

logger = logging.getLogger(__name__)


class MetricsEnvelope(BaseModel):
    """Response envelope used by every backend read endpoint."""

    data: Any = None
    success: bool
    message: str | None = None


class LiveMetricsSource:
    """HTTP client wrapper for the backend dashboard endpoints.

    Every failure (connection, timeout, error status, undecodable body,
    ``success: false``) surfaces as :class:`MetricsSourceUnavailableError`
    so the API can report it separately from the fallback view.
    """

    name = "live"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_data(self, path: str) -> Any:
        """GET ``path`` and return the envelope's ``data`` payload."""
        try:
            client = await self._get_client()
            response = await client.get(path)
            response.raise_for_status()
            envelope = MetricsEnvelope.model_validate(response.json())
        except httpx.ConnectError as e:
            logger.warning("Metrics backend connection failed: %s", e)
            raise MetricsSourceUnavailableError(
                self.name, "connection failed", details={"path": path}
            ) from e
        except httpx.TimeoutException as e:
            logger.warning("Metrics backend timeout on %s: %s", path, e)
            raise MetricsSourceUnavailableError(
                self.name, "request timed out", details={"path": path}
            ) from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Metrics backend returned error %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            raise MetricsSourceUnavailableError(
                self.name,
                f"backend returned HTTP {e.response.status_code}",
                details={"path": path, "status_code": e.response.status_code},
            ) from e
        except ValueError as e:
            # Invalid JSON or envelope shape
            logger.warning("Metrics backend sent an unreadable body on %s: %s", path, e)
            raise MetricsSourceUnavailableError(
                self.name, "unreadable response body", details={"path": path}
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Metrics backend request failed (%s): %s",
                type(e).__name__,
                e,
            )
            raise MetricsSourceUnavailableError(
                self.name, "request failed", details={"path": path}
            ) from e

        if not envelope.success:
            logger.warning(
                "Metrics backend rejected %s: %s",
                path,
                envelope.message or "no message",
            )
            raise MetricsSourceUnavailableError(
                self.name,
                envelope.message or "backend reported failure",
                code=ErrorCode.METRICS_SOURCE_REJECTED,
                details={"path": path},
            )
        return envelope.data

    async def fetch_statistics(self) -> RawMetricsRecord | None:
        data = await self._get_data("/api/v1/dashboard/stats")
        return as_mapping(data)

    async def fetch_activity(self) -> list[dict[str, Any]]:
        data = await self._get_data("/api/v1/dashboard/activity")
        return as_list(as_mapping(data).get("items"))

    async def fetch_recent_articles(self) -> list[dict[str, Any]]:
        data = await self._get_data("/api/v1/dashboard/articles")
        return as_list(as_mapping(data).get("articles"))

    async def fetch_revenue(self) -> RawMetricsRecord | None:
        data = await self._get_data("/api/v1/dashboard/revenue")
        return as_mapping(data)
