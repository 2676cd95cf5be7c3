from typing import Callable, List

import httpx
import pytest

from agent_tools import AgentDeps


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture(autouse=True)
def _no_github_token(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def make_deps():
    """Build deps around a recording transport answering with ``handler``."""

    def factory(handler, token=None):
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        return AgentDeps(client=client, github_token=token), transport

    return factory


def json_response(payload, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.fixture
def respond_json():
    return json_response
