"""Request Result: tagged Ok/Err union returned by the request pipeline.

Invariants:
    - Ok carries the payload verbatim, including falsy payloads (0, "", False, None)
    - Err always carries a FailureReason; message/code/status are optional detail
    - Neither variant defines __bool__: callers branch on .ok, never on truthiness
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from envelope_client.core.domain_types import FailureReason


@dataclass(frozen=True)
class Ok:
    """Successful request: the envelope's data (or the raw body in passthrough mode)."""
    data: Any
    ok: ClassVar[bool] = True

    def unwrap_or(self, default: Any) -> Any:
        return self.data


@dataclass(frozen=True)
class Err:
    """Failed request, with enough detail for logging and tests."""
    reason: FailureReason
    message: str | None = None
    code: int | None = None
    status_code: int | None = None
    envelope: dict | None = None
    ok: ClassVar[bool] = False

    @property
    def data(self) -> None:
        return None

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Ok | Err
