"""Shared fixtures for the Planhat client tests."""

import httpx
import pytest

from planhat.client import Client


class FakeAPI:
    """Records every request and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = {}

    def respond(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = {} if body is None else body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, bytes):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api():
    """Fake Planhat API backed by httpx.MockTransport."""
    return FakeAPI()


@pytest.fixture
def client(api):
    """Create a client for testing, talking to the fake API."""
    http_client = httpx.Client(transport=httpx.MockTransport(api))
    with Client(
        "test_key",
        region="eu3",
        http_client=http_client,
        tenant_uuid="tenant-123",
    ) as c:
        yield c
    http_client.close()
