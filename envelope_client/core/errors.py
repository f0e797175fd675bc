"""Error Hierarchy: typed, categorized exceptions for envelope client failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only caller-contract violations and transport failures are raised;
      HTTP and envelope failures travel as Err results (core/result.py)
    - to_dict() produces a flat structure suitable for structured logs

Design Decisions:
    - Single hierarchy with EnvelopeClientError base: callers catch one type
    - ErrorContext as dataclass: request details without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request details attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    url: str | None = None
    method: str | None = None
    resource: str | None = None
    debug_info: dict[str, Any] | None = None


class EnvelopeClientError(Exception):
    """Base exception for all envelope client errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Flatten into a log-friendly mapping."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "url": self.context.url,
            "method": self.context.method,
            "resource": self.context.resource,
        }


# ─── Caller Errors ───────────────────────────────────────────────

class ResourceNameError(EnvelopeClientError):
    """A CRUD operation was called without a resource name."""
    def __init__(self, name: Any, context: ErrorContext | None = None):
        super().__init__(
            f"name can not be empty: {name!r}",
            "RESOURCE_NAME_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.name = name


class UnsupportedMethodError(EnvelopeClientError):
    """auto_fetch was given a verb with no matching wrapper."""
    def __init__(self, method: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unsupported request method: {method}",
            "UNSUPPORTED_METHOD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.method = method


# ─── Infrastructure Errors ───────────────────────────────────────

class TransportError(EnvelopeClientError):
    """The network call itself failed (connection, DNS, timeout)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Transport failure: {message}",
            "TRANSPORT_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context,
        )


class LocaleBundleError(EnvelopeClientError):
    """A translation bundle could not be read or is not a flat mapping."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Locale bundle {path}: {message}",
            "LOCALE_BUNDLE_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context,
        )
        self.path = path
