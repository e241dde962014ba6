"""Fixtures for API unit tests: app factory with injectable downstream transport, AsyncClient."""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from hoptrace.infrastructure.http.downstream_client import DownstreamClient
from hoptrace.main import create_app


class RecordingTransport(httpx.AsyncBaseTransport):
    """Downstream stand-in: answers with a fixed handler and remembers every request."""

    def __init__(self, handler) -> None:
        self.requests: list[httpx.Request] = []
        self._mock = httpx.MockTransport(handler)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await self._mock.handle_async_request(request)


@pytest.fixture
def build_app(make_settings):
    """build_app(transport=None, **settings) -> FastAPI with the downstream routed through transport."""

    def _build(transport: httpx.AsyncBaseTransport | None = None, **overrides):
        settings = make_settings(**overrides)
        downstream = DownstreamClient(settings.downstream_timeout_seconds, transport=transport)
        return create_app(settings, downstream=downstream)

    return _build


@pytest.fixture
def client_for():
    """Async context manager factory: client_for(app) -> AsyncClient bound to app."""

    def _client(app) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _client


@pytest.fixture
def recording_transport():
    return RecordingTransport
