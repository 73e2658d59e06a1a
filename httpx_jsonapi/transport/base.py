"""Transport layer performing the HTTP round trip."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """Status, parsed body and headers of a completed request."""

    status_code: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport:
    """Perform one HTTP request and return its parsed body.

    Implementations raise for connection failures and non-2xx responses;
    the client normalizes whatever they raise.
    """

    async def perform(
        self,
        *,
        url: str,
        method: str,
        headers: Mapping[str, str],
        data: Any = None,
    ) -> TransportResponse:
        """Send the request and return the parsed response."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release any connections held by the transport."""
        return None


class HttpxTransport(Transport):
    """Transport backed by a single ``httpx.AsyncClient``.

    Keyword options are passed straight to ``httpx.AsyncClient`` (timeout,
    limits, proxy, http2, transport, ...). Response compression is
    negotiated by httpx.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, **client_options: Any) -> None:
        self.client = client or httpx.AsyncClient(**client_options)

    async def perform(
        self,
        *,
        url: str,
        method: str,
        headers: Mapping[str, str],
        data: Any = None,
    ) -> TransportResponse:
        content = None if data is None else json.dumps(data).encode("utf-8")
        response = await self.client.request(method, url, headers=dict(headers), content=content)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        response.raise_for_status()
        body = response.json() if response.content else None
        return TransportResponse(
            status_code=response.status_code,
            data=body,
            headers=response.headers,
        )

    async def aclose(self) -> None:
        await self.client.aclose()
