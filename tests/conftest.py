from __future__ import annotations

import sys
import json
import asyncio
from pathlib import Path
from dataclasses import replace
from collections.abc import Callable, Awaitable

import pytest


def pytest_configure() -> None:
    # Keep `import voicelive...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


TEST_ENDPOINT = "https://example-speech.cognitiveservices.azure.com/"
TEST_KEY = "test-speech-key"

_CLOSED = object()


class FakeClientWebSocket:
    """Starlette-style server socket driven by a queue of ASGI receive messages."""

    def __init__(self) -> None:
        self.inbox: asyncio.Queue = asyncio.Queue()
        self.sent: list[tuple[str, str | bytes]] = []
        self.accepted = False
        self.close_calls = 0
        self.close_code: int | None = None
        self.close_reason: str | None = None

    async def accept(self) -> None:
        self.accepted = True

    async def receive(self) -> dict:
        return await self.inbox.get()

    async def send_text(self, text: str) -> None:
        self.sent.append(("text", text))

    async def send_bytes(self, data: bytes) -> None:
        self.sent.append(("bytes", data))

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        self.close_calls += 1
        self.close_code = code
        self.close_reason = reason

    def push_text(self, text: str) -> None:
        self.inbox.put_nowait({"type": "websocket.receive", "text": text})

    def push_bytes(self, data: bytes) -> None:
        self.inbox.put_nowait({"type": "websocket.receive", "bytes": data})

    def disconnect(self, code: int = 1000) -> None:
        self.inbox.put_nowait({"type": "websocket.disconnect", "code": code})

    def sent_json(self) -> list[dict]:
        return [json.loads(payload) for kind, payload in self.sent if kind == "text"]

    def sent_bytes(self) -> list[bytes]:
        return [payload for kind, payload in self.sent if kind == "bytes"]


class FakeUpstream:
    """websockets-style client connection: async-iterable, send(), close()."""

    def __init__(self) -> None:
        self.inbox: asyncio.Queue = asyncio.Queue()
        self.sent: list[str | bytes] = []
        self.close_calls = 0
        self.close_code: int | None = None
        self.close_reason: str | None = None

    def __aiter__(self) -> FakeUpstream:
        return self

    async def __anext__(self) -> str | bytes:
        item = await self.inbox.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            raise item
        return item

    async def send(self, message: str | bytes) -> None:
        self.sent.append(message)

    async def close(self, code: int = 1000, reason: str = "") -> None:
        self.close_calls += 1
        if self.close_code is None:
            self.close_code = code
            self.close_reason = reason
            self.inbox.put_nowait(_CLOSED)

    def push(self, message: str | bytes) -> None:
        self.inbox.put_nowait(message)

    def push_json(self, event: dict) -> None:
        self.push(json.dumps(event))

    def remote_close(self, code: int = 1000, reason: str = "") -> None:
        self.close_code = code
        self.close_reason = reason
        self.inbox.put_nowait(_CLOSED)

    def fail(self, exc: BaseException) -> None:
        self.close_code = 1006
        self.inbox.put_nowait(exc)


class FakeConnector:
    """Upstream connector that hands out one FakeUpstream once `gate` is set."""

    def __init__(self, upstream: FakeUpstream | None = None, *, error: BaseException | None = None) -> None:
        self.upstream = upstream or FakeUpstream()
        self.error = error
        self.gate = asyncio.Event()
        self.gate.set()
        self.calls: list[tuple[str, dict[str, str], float]] = []

    async def __call__(self, url: str, headers: dict[str, str], open_timeout_s: float) -> FakeUpstream:
        self.calls.append((url, headers, open_timeout_s))
        await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.upstream


@pytest.fixture
def make_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[..., object]:
    from voicelive.runtime.settings import load_settings

    for name in ("SPEECH_RESOURCE_ENDPOINT", "SPEECH_KEY", "MAX_CONCURRENT_CONNECTIONS"):
        monkeypatch.delenv(name, raising=False)

    def _make(*, endpoint: str = TEST_ENDPOINT, api_key: str = TEST_KEY, max_connections: int = 100):
        base = load_settings()
        return replace(
            base,
            speech=replace(base.speech, resource_endpoint=endpoint, api_key=api_key),
            limits=replace(base.limits, max_concurrent_connections=max_connections),
        )

    return _make


@pytest.fixture
def client_ws() -> FakeClientWebSocket:
    return FakeClientWebSocket()


@pytest.fixture
def connector() -> FakeConnector:
    return FakeConnector()


@pytest.fixture
def eventually() -> Callable[..., Awaitable[None]]:
    async def _eventually(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not met before timeout")
            await asyncio.sleep(0.001)

    return _eventually
