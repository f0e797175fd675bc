"""Response Envelope: the wire contract every backend response follows.

Invariants:
    - code is required and a JSON integer; strings and booleans are malformed
    - message prefers msg over errmsg
    - Unknown keys are preserved so message handlers see the full envelope

Design Decisions:
    - Pydantic model over dict probing: one validation point, explicit optional fields
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError

from envelope_client.core.domain_types import SUCCESS_CODE


class MalformedEnvelope(ValueError):
    """Body parsed as JSON but does not follow the envelope contract."""


class Envelope(BaseModel):
    """`{code, msg?, errmsg?, errcode?, data?}` as sent by the server."""

    model_config = ConfigDict(extra="allow")

    code: StrictInt
    msg: str | None = None
    errmsg: str | None = None
    errcode: int | None = None
    data: Any = None

    @property
    def message(self) -> str | None:
        return self.msg or self.errmsg

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE

    def as_dict(self) -> dict:
        """Envelope as received, extra keys included."""
        sent = self.model_fields_set | set(self.model_extra or {})
        return {k: v for k, v in self.model_dump().items() if k in sent}


def parse_envelope(payload: Any) -> Envelope:
    """Validate a decoded JSON body. Raises MalformedEnvelope."""
    if not isinstance(payload, dict):
        raise MalformedEnvelope(
            f"expected a JSON object, got {type(payload).__name__}",
        )
    try:
        return Envelope.model_validate(payload)
    except ValidationError as e:
        raise MalformedEnvelope(str(e)) from e
