"""HTTP Transport: fetch-shaped wrapper over httpx.AsyncClient.

Invariants:
    - fetch() returns the response with its body read; status is never interpreted here
    - httpx.TransportError (connect, DNS, timeouts) mapped to TransportError (core/errors.py)
    - Cache directive travels as Cache-Control unless the caller set that header
    - Credentials "omit" strips the client cookie jar from the outgoing request

Design Decisions:
    - Owns its AsyncClient unless one is injected: tests pass httpx.MockTransport
      or httpx.ASGITransport through the `transport` argument
"""

import logging

import httpx

from envelope_client.core.domain_types import CacheMode, CredentialsMode
from envelope_client.core.errors import ErrorContext, TransportError
from envelope_client.core.request import Request, has_header

logger = logging.getLogger(__name__)

_CACHE_CONTROL = {
    CacheMode.NO_CACHE.value: "no-cache",
    CacheMode.NO_STORE.value: "no-store",
    CacheMode.RELOAD.value: "no-cache",
}


class HttpTransport:
    """Performs one HTTP exchange per Request."""

    def __init__(
        self,
        base_url: str = "",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def fetch(self, request: Request) -> httpx.Response:
        headers = dict(request.headers)
        cache_control = _CACHE_CONTROL.get(request.cache)
        if cache_control and not has_header(headers, "Cache-Control"):
            headers["Cache-Control"] = cache_control
        outgoing = self.client.build_request(
            request.method, request.url, headers=headers, content=request.body,
        )
        if (
            request.credentials == CredentialsMode.OMIT.value
            and not has_header(request.headers, "Cookie")
        ):
            outgoing.headers.pop("Cookie", None)

        logger.debug(
            f"{request.method} {outgoing.url}",
            extra={"url": request.url, "method": request.method},
        )
        try:
            return await self.client.send(outgoing)
        except httpx.TransportError as e:
            logger.error(
                f"Network error on {request.method} {request.url}: {e!r}",
                extra={"url": request.url, "method": request.method},
            )
            raise TransportError(
                str(e) or type(e).__name__,
                ErrorContext(url=request.url, method=request.method),
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
