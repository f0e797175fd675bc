"""Request Pipeline: build, send and classify one envelope request.

Invariants:
    - URL gets the configured prefix unless absolute or already prefixed
    - Header precedence: defaults < ClientConfig.headers < caller headers;
      the token header is added last and never overrides a caller-supplied one
    - before_fetch returns a replacement Request or None (keep); it never mutates
    - after_fetch raising aborts the call with Err(HOOK_ABORTED)
    - Non-2xx, malformed bodies and envelope errors come back as Err, never raised
    - TransportError (network failure) is not caught here

Design Decisions:
    - Explicit Result instead of data-or-False: falsy payloads stay Ok
    - Envelope routing lives in ResponseDispatcher so it is testable without a network
"""

import json
import logging
from typing import Any, Callable, Mapping

import httpx

from envelope_client.config import ClientConfig
from envelope_client.core.domain_types import FailureReason, HttpMethod
from envelope_client.core.envelope import MalformedEnvelope, parse_envelope
from envelope_client.core.errors import ErrorContext, UnsupportedMethodError
from envelope_client.core.request import DEFAULT_HEADERS, Request, has_header, merge_headers
from envelope_client.core.result import Err, Ok, Result
from envelope_client.core.urls import parse_auto_url, with_prefix
from envelope_client.infrastructure.transport import HttpTransport
from envelope_client.services.response_dispatcher import ResponseDispatcher, call_hook
from envelope_client.services.token_manager import TokenManager

logger = logging.getLogger(__name__)


def serialize_body(body: Any) -> str | bytes | None:
    if body is None or isinstance(body, (str, bytes)):
        return body
    return json.dumps(body, ensure_ascii=False)


class RequestPipeline:
    """Turns (url, options) into a Result following the envelope contract."""

    def __init__(
        self,
        config: ClientConfig,
        transport: HttpTransport,
        tokens: TokenManager,
        dispatcher: ResponseDispatcher,
    ):
        self.config = config
        self.transport = transport
        self.tokens = tokens
        self.dispatcher = dispatcher

    # ─── Building ────────────────────────────────────────────────

    def build_request(
        self,
        url: str,
        *,
        method: str = HttpMethod.GET.value,
        headers: dict[str, str] | None = None,
        body: Any = None,
        cache: str | None = None,
        credentials: str | None = None,
        raw_data: bool = False,
        on_error: Callable[..., Any] | None = None,
    ) -> Request:
        merged = merge_headers(DEFAULT_HEADERS, self.config.headers, headers)
        merged = self._with_token(merged)
        request = Request(
            url=with_prefix(url, self.config.prefix),
            method=method.upper(),
            headers=merged,
            body=serialize_body(body),
            raw_data=raw_data,
            on_error=on_error,
        )
        if cache is not None:
            request = request.with_changes(cache=cache)
        if credentials is not None:
            request = request.with_changes(credentials=credentials)
        return request

    def _with_token(self, headers: dict[str, str]) -> dict[str, str]:
        if not self.config.set_token_in_headers:
            return headers
        key = self.config.token_header_key
        if not key or has_header(headers, key):
            return headers
        token = self.tokens.get_token()
        if not token:
            return headers
        return {**headers, key: f"{self.config.token_value_prefix or ''}{token}"}

    # ─── Sending ─────────────────────────────────────────────────

    async def request(self, url: str, **options: Any) -> Result:
        request = self.build_request(url, **options)
        if self.config.before_fetch is not None:
            replacement = await call_hook(self.config.before_fetch, request)
            if replacement is not None:
                request = replacement

        response = await self.transport.fetch(request)
        extra = {
            "url": request.url,
            "method": request.method,
            "status_code": response.status_code,
        }

        if self.config.after_fetch is not None:
            try:
                await call_hook(self.config.after_fetch, response)
            except Exception as e:
                logger.error(f"after_fetch aborted {request.url}: {e}", extra=extra)
                return Err(
                    FailureReason.HOOK_ABORTED,
                    message=str(e),
                    status_code=response.status_code,
                )

        if not response.is_success:
            return await self.dispatcher.dispatch(
                None, url=request.url, status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Unparseable body from {request.url}: {e}", extra=extra)
            return Err(
                FailureReason.MALFORMED_BODY,
                message=str(e),
                status_code=response.status_code,
            )

        if request.raw_data:
            return Ok(payload)

        try:
            envelope = parse_envelope(payload)
        except MalformedEnvelope as e:
            logger.error(f"Body from {request.url} is not an envelope: {e}", extra=extra)
            return Err(
                FailureReason.MALFORMED_BODY,
                message=str(e),
                status_code=response.status_code,
            )

        return await self.dispatcher.dispatch(
            envelope,
            url=request.url,
            status_code=response.status_code,
            on_error=request.on_error,
        )

    # ─── Verb wrappers ───────────────────────────────────────────

    async def get(self, url: str, params: Mapping[str, Any] | None = None, **options: Any) -> Result:
        if params:
            url = f"{url}{'&' if '?' in url else '?'}{httpx.QueryParams(params)}"
        return await self.request(url, **options)

    async def post(self, url: str, body: Any = None, **options: Any) -> Result:
        return await self.request(url, method=HttpMethod.POST.value, body=body, **options)

    async def put(self, url: str, body: Any = None, **options: Any) -> Result:
        return await self.request(url, method=HttpMethod.PUT.value, body=body, **options)

    async def delete(self, url: str, body: Any = None, **options: Any) -> Result:
        return await self.request(url, method=HttpMethod.DELETE.value, body=body, **options)

    del_ = delete

    async def auto_fetch(self, spec: str, body: Any = None, **options: Any) -> Result:
        """Call by shorthand: auto_fetch("POST /user", {...})."""
        method, url = parse_auto_url(spec)
        if method == "get":
            return await self.get(url, body if isinstance(body, Mapping) else None, **options)
        wrappers = {
            "post": self.post,
            "put": self.put,
            "del": self.delete,
            "delete": self.delete,
        }
        wrapper = wrappers.get(method)
        if wrapper is None:
            raise UnsupportedMethodError(method, ErrorContext(url=url))
        return await wrapper(url, body, **options)
