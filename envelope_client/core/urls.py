"""URL Helpers: prefixing, resource URLs and the "METHOD /path" shorthand.

Invariants:
    - with_prefix is idempotent: with_prefix(with_prefix(u)) == with_prefix(u)
    - Absolute URLs (scheme://... or protocol-relative //host) pass through unchanged
    - The seam between prefix and path carries exactly one slash
"""

import re

from envelope_client.core.domain_types import HttpMethod
from envelope_client.core.errors import UnsupportedMethodError

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def is_absolute(url: str) -> bool:
    return url.startswith("//") or bool(_SCHEME.match(url))


def normalize_prefix(prefix: str | None) -> str:
    """'api/' -> '/api', '/' -> '', None -> ''."""
    if not prefix:
        return ""
    prefix = prefix if prefix.startswith("/") else f"/{prefix}"
    return prefix.rstrip("/")


def with_prefix(url: str, prefix: str | None) -> str:
    """Prepend the configured base path unless url is absolute or already prefixed."""
    if is_absolute(url):
        return url
    prefix = normalize_prefix(prefix)
    if not prefix:
        return url
    if url == prefix or url.startswith(f"{prefix}/") or url.startswith(f"{prefix}?"):
        return url
    if not url.startswith("/"):
        url = f"/{url}"
    return f"{prefix}{url}"


def model_url(name: str) -> str:
    """Resource name to its CRUD endpoint: 'User' -> '/user'."""
    return f"/{name}".lower()


def parse_auto_url(spec: str) -> tuple[str, str]:
    """'POST /user' -> ('post', '/user'); a bare path means GET."""
    parts = spec.split()
    if not parts:
        raise UnsupportedMethodError(repr(spec))
    if len(parts) == 1:
        return HttpMethod.GET.value.lower(), parts[0]
    return parts[0].lower(), parts[1]
