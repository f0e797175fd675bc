"""Domain Types: enums and reserved codes shared across the pipeline.

Invariants:
    - SUCCESS_CODE is the only success signal of the response envelope
    - SESSION_EXPIRED_CODE and NAVIGATION_CODES never reach the message handler
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON log fields without custom encoders
"""

from enum import Enum


# ─── Envelope Codes ──────────────────────────────────────────────

SUCCESS_CODE = 0
SESSION_EXPIRED_CODE = 555
NAVIGATION_CODES = frozenset({404, 500, 403})

# Values that storage and query strings use to spell "no token"
TOKEN_SENTINELS = frozenset({"", "null", "undefined"})


# ─── Enums ───────────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """Verbs understood by the pipeline and the auto-fetch dispatcher."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class CacheMode(str, Enum):
    """Cache directive of an outgoing request (mapped to Cache-Control)."""
    DEFAULT = "default"
    NO_CACHE = "no-cache"
    NO_STORE = "no-store"
    RELOAD = "reload"


class CredentialsMode(str, Enum):
    """Whether the client cookie jar travels with the request."""
    INCLUDE = "include"
    OMIT = "omit"


class DispatchAction(str, Enum):
    """The single action the dispatcher takes for a response envelope."""
    SUCCESS = "success"
    LOGOUT = "logout"
    NAVIGATE = "navigate"
    MESSAGE = "message"
    LOG = "log"


class FailureReason(str, Enum):
    """Why a request produced no data."""
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    MALFORMED_BODY = "malformed_body"
    HOOK_ABORTED = "hook_aborted"
    BUSINESS_ERROR = "business_error"
    SESSION_EXPIRED = "session_expired"
    NAVIGATION = "navigation"
