from __future__ import annotations

from typing import Any

import pytest

_ENV_VARS = (
    "ZENDESK_SUBDOMAIN",
    "ZENDESK_BASE_URL",
    "ZENDESK_EMAIL",
    "ZENDESK_API_TOKEN",
    "ZENDESK_OAUTH_TOKEN",
    "HTTP_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests.
    monkeypatch.chdir(tmp_path)


class RecordingTransport:
    """Transport double that replays canned bodies and records every call."""

    def __init__(self, *bodies: bytes | Exception) -> None:
        self._bodies = list(bodies)
        self.calls: list[tuple[str, str, Any]] = []

    async def _reply(self, verb: str, url: str, body: Any = None) -> bytes:
        self.calls.append((verb, url, body))
        reply = self._bodies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def get(self, url: str, *, timeout: float | None = None) -> bytes:
        return await self._reply("GET", url)

    async def post(self, url: str, body: Any = None, *, timeout: float | None = None) -> bytes:
        return await self._reply("POST", url, body)

    async def patch(self, url: str, body: Any = None, *, timeout: float | None = None) -> bytes:
        return await self._reply("PATCH", url, body)

    async def delete(self, url: str, *, timeout: float | None = None) -> bytes:
        return await self._reply("DELETE", url)


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    return RecordingTransport
