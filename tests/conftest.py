"""Pytest configuration and fixtures for httpie-lite tests."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from httpie_lite.render.response import ResponseView


@pytest.fixture
def response_view():
    """Create a ResponseView for rendering tests."""

    def _create_view(
        body: str = "",
        content_type: str | None = "text/plain",
        status_code: int = 200,
        reason: str = "OK",
        headers: list[tuple[str, str]] | None = None,
    ) -> ResponseView:
        all_headers = list(headers or [])
        if content_type is not None:
            all_headers.insert(0, ("content-type", content_type))
        return ResponseView(
            http_version="HTTP/1.1",
            status_code=status_code,
            reason=reason,
            headers=all_headers,
            body=body,
        )

    return _create_view


@pytest.fixture
def recording_transport():
    """Create an httpx.MockTransport that records requests.

    Returns a factory taking an optional handler; the transport's
    ``requests`` attribute lists every request it received.
    """

    def _create_transport(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(
                200,
                headers={"content-type": "application/json"},
                content=json.dumps({"ok": True}).encode(),
            )

        transport = httpx.MockTransport(_handle)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _create_transport
