"""Service test fixtures: settings, scripted transport and composed client.

Invariants:
    - Every test gets a fresh ClientConfig with in-memory storage
    - No request leaves the process: MockTransport or ASGITransport only
    - `hooks` records every hook invocation in call order
"""

import httpx
import pytest

from envelope_client.config import ClientConfig, Settings
from envelope_client.services.client import EnvelopeClient

from tests.services.mock_server import ScriptedServer


class HookRecorder:
    """Collects hook calls as (name, args) tuples."""

    def __init__(self):
        self.calls: list[tuple] = []

    def of(self, name: str) -> list[tuple]:
        return [args for hook, args in self.calls if hook == name]

    def message_handler(self, msg, code, envelope):
        self.calls.append(("message", (msg, code, envelope)))

    def on_logout(self, url):
        self.calls.append(("logout", (url,)))

    def navigate(self, path):
        self.calls.append(("navigate", (path,)))


@pytest.fixture
def settings():
    return Settings(_env_file=None, base_url="http://testserver", prefix="/api")


@pytest.fixture
def hooks():
    return HookRecorder()


@pytest.fixture
def config(settings, hooks):
    return ClientConfig.from_settings(
        settings,
        message_handler=hooks.message_handler,
        on_logout=hooks.on_logout,
        navigate=hooks.navigate,
    )


@pytest.fixture
def server():
    return ScriptedServer()


@pytest.fixture
async def client(settings, config, server):
    async with EnvelopeClient(
        config=config, settings=settings, transport=httpx.MockTransport(server),
    ) as c:
        yield c
