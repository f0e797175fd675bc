"""Client Configuration: environment-driven Settings and the live ClientConfig.

Invariants:
    - Secrets (tokens) never come from Settings; only policy and endpoints do
    - get_settings() is cached (lru_cache): single instance per process
    - ClientConfig is mutated only through configure(); components read it live
    - Every ClientConfig field answers to its snake_case and camelCase name

Design Decisions:
    - pydantic-settings for Settings: validation, type coercion, .env file support
    - ClientConfig injected into each component instead of a module-level global
    - configure() performs no validation: callers own the types they install
"""

from functools import lru_cache
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from envelope_client.core.merge import deep_merge
from envelope_client.core.protocols import (
    AfterFetch,
    BeforeFetch,
    KeyValueStorage,
    LocationProvider,
    LogoutHook,
    MessageHandler,
    MessageWrapper,
    NavigateHook,
)
from envelope_client.infrastructure.storage import MemoryStorage


class Settings(BaseSettings):
    """Client settings from environment variables (ENVELOPE_CLIENT_*)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ENVELOPE_CLIENT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Transport
    base_url: str = ""
    timeout_seconds: float = 30.0

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined with a leading slash; avoid '//' at the seam."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Request pipeline
    prefix: str = "/api"

    # Token policy
    token_storage_key: str = "token"
    token_query_key: str = "token"
    token_header_key: str = "Authorization"
    token_value_prefix: str = "Bearer "
    set_token_in_headers: bool = True

    # CRUD facade
    id_key: str = "ID"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


class ClientConfig(BaseModel):
    """Live configuration shared by token manager, pipeline, dispatcher and resolver."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    prefix: str = "/api"
    token_storage_key: str = "token"
    token_query_key: str = "token"
    token_header_key: str = "Authorization"
    token_value_prefix: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    set_token_in_headers: bool = True
    # Cached token; TokenManager keeps it in sync with storage
    token: str | None = None
    id_key: str = "ID"

    message_handler: MessageHandler | None = None
    before_fetch: BeforeFetch | None = None
    after_fetch: AfterFetch | None = None
    on_logout: LogoutHook | None = None
    navigate: NavigateHook | None = None
    location: LocationProvider | None = None

    locale_messages: dict[str, str] = Field(default_factory=dict)
    locale_message_wrapper: MessageWrapper | None = None

    storage: KeyValueStorage = Field(default_factory=MemoryStorage)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> "ClientConfig":
        settings = settings or get_settings()
        config = cls(
            prefix=settings.prefix,
            token_storage_key=settings.token_storage_key,
            token_query_key=settings.token_query_key,
            token_header_key=settings.token_header_key,
            token_value_prefix=settings.token_value_prefix or None,
            set_token_in_headers=settings.set_token_in_headers,
            id_key=settings.id_key,
        )
        return config.configure(overrides)

    @classmethod
    def _field_name(cls, key: str) -> str:
        for name, info in cls.model_fields.items():
            if key == name or key == info.alias:
                return name
        return key

    def configure(self, partial: Mapping[str, Any] | None = None, **fields: Any) -> "ClientConfig":
        """Deep-merge `partial` into this configuration and return it."""
        updates = {**(partial or {}), **fields}
        for key, value in updates.items():
            name = self._field_name(key)
            current = getattr(self, name, None)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                value = deep_merge(current, value)
            setattr(self, name, value)
        return self
