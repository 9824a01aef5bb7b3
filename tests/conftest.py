"""Shared fixtures and utilities for depscian tests.

This module provides:
- ``MockAPI``, an in-memory Depscian API served through httpx.MockTransport
  that records every request it receives
- The ``mock_api`` fixture returning a fresh MockAPI per test
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import pytest

from depscian import DepscianClient, Option, with_http_client

TEST_API_KEY = "test-api-key"

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class MockAPI:
    """In-memory Depscian API.

    Routes map an endpoint path relative to the API root (e.g. "/online") to
    a handler. Unknown paths answer 404.
    """

    def __init__(self, root: str = "/v2") -> None:
        self.root = root
        self.routes: dict[str, Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        status_code: int = 200,
        json: Any = None,
        **kwargs: Any,
    ) -> None:
        """Answer ``path`` with a canned response."""

        def respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=json, **kwargs)

        self.routes[path] = respond

    def add_handler(self, path: str, handler: Handler) -> None:
        """Answer ``path`` with a custom handler (may raise or be async)."""
        self.routes[path] = handler

    def handle(self, request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
        self.requests.append(request)
        path = request.url.path.removeprefix(self.root)
        handler = self.routes.get(path)
        if handler is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def http_client(self, **kwargs: Any) -> httpx.AsyncClient:
        """Create an httpx client whose requests are served by this API."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle), **kwargs)

    def client(self, *options: Option, api_key: str = TEST_API_KEY) -> DepscianClient:
        """Create a DepscianClient backed by this API.

        ``options`` are applied after the mock HTTP client is installed.
        """
        return DepscianClient(api_key, with_http_client(self.http_client()), *options)


@pytest.fixture
def mock_api() -> MockAPI:
    """Fresh in-memory API for each test."""
    return MockAPI()
