"""Envelope Classification: which single action a response triggers.

Invariants:
    - Exactly one DispatchAction per envelope
    - NAVIGATE and MESSAGE are mutually exclusive, decided by NAVIGATION_CODES
    - No envelope (transport-level failure) classifies as LOG
"""

from envelope_client.core.domain_types import (
    DispatchAction,
    FailureReason,
    NAVIGATION_CODES,
    SESSION_EXPIRED_CODE,
    SUCCESS_CODE,
)
from envelope_client.core.envelope import Envelope

_FAILURE_REASONS: dict[DispatchAction, FailureReason] = {
    DispatchAction.LOGOUT: FailureReason.SESSION_EXPIRED,
    DispatchAction.NAVIGATE: FailureReason.NAVIGATION,
    DispatchAction.MESSAGE: FailureReason.BUSINESS_ERROR,
    DispatchAction.LOG: FailureReason.HTTP_STATUS,
}


def classify(envelope: Envelope | None) -> DispatchAction:
    if envelope is None:
        return DispatchAction.LOG
    if envelope.code == SUCCESS_CODE:
        return DispatchAction.SUCCESS
    if envelope.code == SESSION_EXPIRED_CODE:
        return DispatchAction.LOGOUT
    if envelope.code in NAVIGATION_CODES:
        return DispatchAction.NAVIGATE
    return DispatchAction.MESSAGE


def failure_reason(action: DispatchAction) -> FailureReason:
    """Err reason for a non-success action."""
    return _FAILURE_REASONS[action]


def navigation_target(code: int) -> str:
    return f"/{code}"
