"""Token Manager: session token across the page URL and persistent storage.

Invariants:
    - A token in the page URL's query string wins over cache and storage
    - Sentinel values ("", "null", "undefined") are absent tokens wherever they come from
    - When the resolved token differs from the cached one, cache and storage are
      updated before get_token() returns (self-healing sync)
    - clear_token() leaves both cache and storage empty
"""

import logging

import httpx

from envelope_client.config import ClientConfig
from envelope_client.core.domain_types import TOKEN_SENTINELS

logger = logging.getLogger(__name__)


def _normalize(value: str | None) -> str | None:
    if value is None or value in TOKEN_SENTINELS:
        return None
    return value


class TokenManager:
    """Reads and writes the token held in ClientConfig.token and its storage."""

    def __init__(self, config: ClientConfig):
        self.config = config

    def _query_token(self) -> str | None:
        if self.config.location is None:
            return None
        current = self.config.location()
        if not current:
            return None
        try:
            url = httpx.URL(current)
        except httpx.InvalidURL:
            logger.warning(f"Unparseable page URL: {current!r}")
            return None
        key = self.config.token_query_key
        value = url.params.get(key)
        # Hash routers carry the query inside the fragment: /#/page?token=...
        if value is None and "?" in url.fragment:
            value = httpx.QueryParams(url.fragment.split("?", 1)[1]).get(key)
        return _normalize(value)

    def get_token(self) -> str | None:
        cached = _normalize(self.config.token)
        token = (
            self._query_token()
            or cached
            or _normalize(self.config.storage.get(self.config.token_storage_key))
        )
        if token is not None and token != cached:
            self._store(token)
        return token

    def set_token(self, value: str | None) -> None:
        token = _normalize(value)
        if token is None:
            self.clear_token()
            return
        self._store(token)

    def clear_token(self) -> None:
        self.config.token = None
        self.config.storage.remove(self.config.token_storage_key)
        logger.info("Session token cleared")

    def _store(self, token: str) -> None:
        self.config.token = token
        self.config.storage.set(self.config.token_storage_key, token)
