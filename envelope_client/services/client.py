"""Envelope Client: wires configuration, tokens, pipeline and facades together.

Invariants:
    - One ClientConfig instance shared by every component of a client
    - The client owns its transport; use it as an async context manager or
      call aclose()

Design Decisions:
    - Composition root instead of module globals: several clients (e.g. two
      backends) can coexist in one process
"""

from pathlib import Path
from typing import Any

import httpx

from envelope_client.config import ClientConfig, Settings, get_settings
from envelope_client.core.icons import parse_icon
from envelope_client.core.result import Result
from envelope_client.core.urls import with_prefix
from envelope_client.infrastructure.locale_bundle import load_locale_messages
from envelope_client.infrastructure.observability import setup_logging
from envelope_client.infrastructure.transport import HttpTransport
from envelope_client.services.crud_facade import CrudFacade
from envelope_client.services.downloads import download_file
from envelope_client.services.locale_resolver import LocaleResolver
from envelope_client.services.request_pipeline import RequestPipeline
from envelope_client.services.response_dispatcher import ResponseDispatcher
from envelope_client.services.token_manager import TokenManager


class EnvelopeClient:
    """Entry point: request pipeline, CRUD facade, tokens and locale lookup."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        settings = settings or get_settings()
        self.config = config or ClientConfig.from_settings(settings)
        self.transport = HttpTransport(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            transport=transport,
            client=http_client,
        )
        self.tokens = TokenManager(self.config)
        self.dispatcher = ResponseDispatcher(self.config, self.tokens)
        self.pipeline = RequestPipeline(
            self.config, self.transport, self.tokens, self.dispatcher,
        )
        self.crud = CrudFacade(self.config, self.pipeline)
        self.locale = LocaleResolver(self.config)

    async def __aenter__(self) -> "EnvelopeClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    def configure(self, partial: dict[str, Any] | None = None, **fields: Any) -> ClientConfig:
        return self.config.configure(partial, **fields)

    # ─── Pipeline shortcuts ──────────────────────────────────────

    async def request(self, url: str, **options: Any) -> Result:
        return await self.pipeline.request(url, **options)

    async def get(self, url: str, params: dict[str, Any] | None = None, **options: Any) -> Result:
        return await self.pipeline.get(url, params, **options)

    async def post(self, url: str, body: Any = None, **options: Any) -> Result:
        return await self.pipeline.post(url, body, **options)

    async def put(self, url: str, body: Any = None, **options: Any) -> Result:
        return await self.pipeline.put(url, body, **options)

    async def delete(self, url: str, body: Any = None, **options: Any) -> Result:
        return await self.pipeline.delete(url, body, **options)

    async def auto_fetch(self, spec: str, body: Any = None, **options: Any) -> Result:
        return await self.pipeline.auto_fetch(spec, body, **options)

    def with_prefix(self, url: str) -> str:
        return with_prefix(url, self.config.prefix)

    async def download_file(
        self, url: str, filename: str | None = None,
        directory: str | Path = ".", **options: Any,
    ) -> Path | None:
        return await download_file(self.transport, url, filename, directory, **options)

    # ─── Tokens, locale, formatting ──────────────────────────────

    def get_token(self) -> str | None:
        return self.tokens.get_token()

    def set_token(self, value: str | None) -> None:
        self.tokens.set_token(value)

    def clear_token(self) -> None:
        self.tokens.clear_token()

    def L(self, key: str, default_message: str | None = None,
          context: dict[str, Any] | None = None, *, wrap: bool = True) -> Any:
        return self.locale.resolve(key, default_message, context, wrap=wrap)

    def install_locale_bundle(self, path: str | Path) -> None:
        """Merge a JSON translation bundle into locale_messages."""
        self.config.configure(locale_messages=load_locale_messages(path))

    parse_icon = staticmethod(parse_icon)


def create_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    **overrides: Any,
) -> EnvelopeClient:
    """Build a client from environment settings, with logging configured.

    Keyword overrides are applied to the ClientConfig (snake_case or camelCase).
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    config = ClientConfig.from_settings(settings, **overrides)
    return EnvelopeClient(config=config, settings=settings, transport=transport)
