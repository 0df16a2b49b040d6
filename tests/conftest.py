"""
Shared fixtures: a fake HTTP backend on httpx.MockTransport, a manual clock,
and an assistant wired to both.
"""

import httpx
import pytest

from ytdl_assistant.services.assistant import DownloaderAssistant
from ytdl_assistant.services.chat_state import RecordingRenderer
from ytdl_assistant.utils.config_store import ConfigStore, SessionStorage

GEMINI_URL = "https://gemini.test/v1beta/models/gemini-pro:generateContent"


class FakeBackend:
    """Records every outbound request and answers with the configured responder."""

    def __init__(self):
        self.requests = []
        self.responder = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def reply(self, status_code: int = 200, **kwargs):
        self.responder = lambda request: httpx.Response(status_code, **kwargs)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return SessionStorage()


@pytest.fixture
def assistant(backend, clock, storage):
    client = httpx.AsyncClient(transport=httpx.MockTransport(backend))
    return DownloaderAssistant(
        http_client=client,
        config_store=ConfigStore(storage),
        renderer=RecordingRenderer(),
        clock=clock,
        gemini_api_url=GEMINI_URL,
    )
