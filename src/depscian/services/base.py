"""Shared plumbing for resource-scoped service facades."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TypeVar

import httpx

from depscian.api import ApiResponse, EndpointClient, unpack

T = TypeVar("T")


class Service:
    """Base class for facades over a shared ``EndpointClient``.

    The endpoint client is injected and not owned: every facade of a
    ``DepscianClient`` holds the same instance.
    """

    def __init__(self, endpoints: EndpointClient):
        self._endpoints = endpoints

    async def _call(self, request: Awaitable[ApiResponse[T]]) -> T:
        """Await an endpoint call and unpack its outcome."""
        try:
            response = await request
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return unpack(None, None, e)
        return unpack(response.parsed, response)
