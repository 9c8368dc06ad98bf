"""Shared fixtures: a provider wired to an in-memory httpx transport."""

import json
from urllib.parse import parse_qs

import httpx
import pytest

from uptime_notify.providers.xmatters import XMattersProvider

XMATTERS_URL = "https://acme.xmatters.com/api/integration/1/functions/abc/triggers"


class RecordingTransport:
    """Records every request and answers it with ``handler``."""

    def __init__(self, handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client_factory(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content)


def form_body(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


@pytest.fixture
def make_provider():
    """Build (provider, transport) for a response handler and optional base URL."""

    def _make(handler, base_url=None):
        transport = RecordingTransport(handler)

        async def lookup(key):
            return base_url if key == "primaryBaseURL" else None

        provider = XMattersProvider(
            client_factory=transport.client_factory,
            setting_lookup=lookup,
        )
        return provider, transport

    return _make


@pytest.fixture
def up_monitor():
    return {
        "id": 42,
        "name": "API",
        "type": "http",
        "url": "https://api.example.com/health",
        "hostname": None,
        "port": None,
    }
