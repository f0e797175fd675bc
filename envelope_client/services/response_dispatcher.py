"""Response Dispatcher: performs the single action an envelope calls for.

Invariants:
    - Exactly one action fires per dispatch() call (see core/dispatch.py)
    - SESSION_EXPIRED clears the token before on_logout runs
    - Navigation codes call navigate("/<code>") and never the message handler
    - Handler and hook exceptions propagate to the caller of request()

Design Decisions:
    - Independent of the network layer: tests feed synthetic envelopes directly
    - Loop prevention for logout requests is the on_logout hook's responsibility;
      it receives the URL that triggered the expiry
"""

import inspect
import logging
from typing import Any, Callable

from envelope_client.config import ClientConfig
from envelope_client.core.dispatch import classify, failure_reason, navigation_target
from envelope_client.core.domain_types import DispatchAction
from envelope_client.core.envelope import Envelope
from envelope_client.core.result import Err, Ok, Result
from envelope_client.services.token_manager import TokenManager

logger = logging.getLogger(__name__)


async def call_hook(hook: Callable[..., Any], *args: Any) -> Any:
    """Call a sync or async hook and return its result."""
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class ResponseDispatcher:
    """Routes parsed envelopes to success, logout, navigation or the message handler."""

    def __init__(self, config: ClientConfig, tokens: TokenManager):
        self.config = config
        self.tokens = tokens

    async def dispatch(
        self,
        envelope: Envelope | None,
        *,
        url: str = "",
        status_code: int | None = None,
        on_error: Callable[..., Any] | None = None,
    ) -> Result:
        action = classify(envelope)
        extra = {"url": url, "action": action.value, "status_code": status_code}

        if action is DispatchAction.SUCCESS:
            return Ok(envelope.data)

        if action is DispatchAction.LOG:
            logger.error(f"HTTP {status_code} on {url}", extra=extra)
            return Err(failure_reason(action), status_code=status_code)

        extra["envelope_code"] = envelope.code
        err = Err(
            failure_reason(action),
            message=envelope.message,
            code=envelope.code,
            status_code=status_code,
            envelope=envelope.as_dict(),
        )

        if action is DispatchAction.LOGOUT:
            logger.warning(f"Session expired on {url}", extra=extra)
            self.tokens.clear_token()
            if self.config.on_logout is not None:
                await call_hook(self.config.on_logout, url)
            return err

        if action is DispatchAction.NAVIGATE:
            target = navigation_target(envelope.code)
            logger.error(f"Envelope code {envelope.code} on {url}, navigating to {target}", extra=extra)
            if self.config.navigate is not None:
                await call_hook(self.config.navigate, target)
            else:
                logger.warning(f"No navigate hook configured for {target}", extra=extra)
            return err

        logger.error(f"Envelope error on {url}: {envelope.message}", extra=extra)
        handler = on_error or self.config.message_handler
        if handler is not None:
            await call_hook(handler, envelope.message, envelope.code, envelope.as_dict())
        return err
