"""Token Manager tests: round-trip, sentinels, query-string precedence, self-healing sync.

Tests cover:
    - set_token/get_token round-trip for ordinary tokens
    - "null", "undefined", "" and None clear cache and storage
    - A token in the page URL wins and is cached into storage
    - Storage is consulted when the cache is empty
"""

import pytest

from envelope_client.config import ClientConfig
from envelope_client.infrastructure.storage import MemoryStorage
from envelope_client.services.token_manager import TokenManager


def _manager(location=None, **fields):
    storage = MemoryStorage()
    config = ClientConfig(storage=storage, location=location, **fields)
    return TokenManager(config), config, storage


def test_round_trip():
    tokens, config, storage = _manager()
    tokens.set_token("abc123")
    assert tokens.get_token() == "abc123"
    assert storage.get("token") == "abc123"
    assert config.token == "abc123"


@pytest.mark.parametrize("value", ["null", "undefined", "", None])
def test_sentinels_clear(value):
    tokens, config, storage = _manager()
    tokens.set_token("abc123")
    tokens.set_token(value)
    assert tokens.get_token() is None
    assert "token" not in storage
    assert config.token is None


def test_clear_token():
    tokens, config, storage = _manager()
    tokens.set_token("abc123")
    tokens.clear_token()
    assert tokens.get_token() is None
    assert storage.get("token") is None


def test_query_token_wins_and_is_cached():
    tokens, config, storage = _manager(
        location=lambda: "https://spa.example.com/home?token=from-url",
    )
    config.token = "stale"
    assert tokens.get_token() == "from-url"
    assert config.token == "from-url"
    assert storage.get("token") == "from-url"


def test_query_token_in_hash_route():
    tokens, config, storage = _manager(
        location=lambda: "https://spa.example.com/#/home?x=1&token=from-hash",
    )
    assert tokens.get_token() == "from-hash"


def test_query_token_sentinel_is_ignored():
    tokens, config, storage = _manager(location=lambda: "https://spa.example.com/?token=null")
    tokens.set_token("kept")
    assert tokens.get_token() == "kept"


def test_custom_query_and_storage_keys():
    tokens, config, storage = _manager(
        location=lambda: "http://localhost/?access=q-token",
        token_query_key="access",
        token_storage_key="session.token",
    )
    assert tokens.get_token() == "q-token"
    assert storage.get("session.token") == "q-token"


def test_storage_seeds_empty_cache():
    tokens, config, storage = _manager()
    storage.set("token", "persisted")
    assert tokens.get_token() == "persisted"
    assert config.token == "persisted"


def test_storage_sentinel_reads_as_absent():
    tokens, config, storage = _manager()
    storage.set("token", "undefined")
    assert tokens.get_token() is None

