"""Shared fixtures for proxy service tests."""

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from api_proxy import UpstreamClient, create_app
from api_proxy.processor import BaseProcessor


class FakeUpstream:
    """Records outbound requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(404)

    def respond_json(self, payload, status_code: int = 200):
        self.handler = lambda request: httpx.Response(status_code, json=payload)

    def fail_with(self, exc_type: type[httpx.RequestError], message: str = "boom"):
        def handler(request):
            raise exc_type(message, request=request)

        self.handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]

    def client(self) -> UpstreamClient:
        return UpstreamClient(transport=httpx.MockTransport(self))


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(fake_upstream):
    """Build a TestClient for a processor wired to the fake upstream."""

    def _make(processor: BaseProcessor) -> TestClient:
        app = create_app(processor, upstream=fake_upstream.client())
        return TestClient(app)

    return _make
