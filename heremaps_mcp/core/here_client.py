"""Async HERE Maps REST client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .exceptions import ExternalServiceError, MalformedResponseError
from .http_client import async_http_client
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class OutboundRequest:
    """A GET request against one of the HERE endpoints."""

    url: str
    params: Mapping[str, str] = field(default_factory=dict)

    @property
    def full_url(self) -> str:
        if not self.params:
            return self.url
        return f"{self.url}?{httpx.QueryParams(dict(self.params))}"


class HereMapsClient:
    """Minimal async client for the HERE Maps REST APIs.

    One GET per call, no retries. ``transport`` lets tests plug in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def get_json(self, request: OutboundRequest) -> Any:
        logger.debug("here_request", url=request.url)

        try:
            async with async_http_client(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(request.url, params=dict(request.params))
        except httpx.HTTPError as exc:
            logger.warning(
                "here_request_failed",
                url=request.url,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise ExternalServiceError(f"HERE Maps request failed: {exc}") from exc

        logger.debug("here_response", url=request.url, status_code=response.status_code)

        if response.is_error:
            raise ExternalServiceError(
                f"HERE Maps responded with {response.status_code}: {response.text}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"HERE Maps returned a non-JSON body from {request.url}"
            ) from exc
