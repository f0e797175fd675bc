"""Outgoing Request: the value the pipeline builds and hooks transform.

Invariants:
    - Built fresh per call, never retained after the response is classified
    - Hooks receive a Request and return a Request (or None to keep it);
      with_changes() returns a copy, the original is never mutated
    - headers keys keep the casing they were given
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from envelope_client.core.domain_types import CacheMode, CredentialsMode, HttpMethod


@dataclass(frozen=True)
class Request:
    url: str
    method: str = HttpMethod.GET.value
    headers: dict[str, str] = field(default_factory=dict)
    body: str | bytes | None = None
    cache: str = CacheMode.NO_CACHE.value
    credentials: str = CredentialsMode.INCLUDE.value
    # Return the decoded body untouched instead of unwrapping the envelope
    raw_data: bool = False
    # Per-call replacement for the configured message handler
    on_error: Callable[..., Any] | None = None

    def with_changes(self, **changes: Any) -> "Request":
        return replace(self, **changes)

    def with_headers(self, headers: dict[str, str]) -> "Request":
        """Copy with `headers` layered over the current ones."""
        return replace(self, headers={**self.headers, **headers})


DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def has_header(headers: dict[str, str], name: str) -> bool:
    lowered = name.lower()
    return any(key.lower() == lowered for key in headers)


def merge_headers(*layers: dict[str, str] | None) -> dict[str, str]:
    """Later layers win; names compare case-insensitively, last spelling kept."""
    merged: dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged
