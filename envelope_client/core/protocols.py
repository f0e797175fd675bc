"""Boundary Protocols: contracts between the pipeline and its collaborators.

Invariants:
    - Services depend on these shapes, never on concrete storage classes
    - Hooks are plain callables; async hooks are awaited by the pipeline

Design Decisions:
    - Protocol over ABC: structural subtyping, any dict-like store qualifies
    - runtime_checkable so the configuration model can validate the storage slot
"""

from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

from envelope_client.core.request import Request


@runtime_checkable
class KeyValueStorage(Protocol):
    """String key/value store, typically session-scoped."""
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


# (message, code, envelope) -> ignored
MessageHandler = Callable[[Union[str, None], Union[int, None], Union[dict, None]], Any]
BeforeFetch = Callable[[Request], Union[Request, None, Awaitable[Union[Request, None]]]]
AfterFetch = Callable[[Any], Any]
LogoutHook = Callable[[str], Any]
NavigateHook = Callable[[str], Any]
LocationProvider = Callable[[], Union[str, None]]
MessageWrapper = Callable[[str], Any]
