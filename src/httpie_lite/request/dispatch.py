"""One-shot request dispatch with httpx.

Each invocation creates one AsyncClient, sends exactly one request, reads the
full response and closes the client. HTTP error statuses (4xx/5xx) are
ordinary responses here; only transport failures raise.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import httpx

from httpie_lite.render.response import ResponseView
from httpie_lite.request.parser import KvPair

_LOGGER = logging.getLogger(__name__)


class NetworkError(Exception):
    """Raised when a request fails before a response is received."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Request to {url} failed: {message}")


# =============================================================================
# Request variants
# =============================================================================


@dataclass(frozen=True)
class GetArgs:
    """Arguments of the get command.

    Attributes:
        url: Validated absolute URL
    """

    url: str


@dataclass(frozen=True)
class PostArgs:
    """Arguments of the post command.

    Attributes:
        url: Validated absolute URL
        body: key=value pairs in command-line order
    """

    url: str
    body: list[KvPair] = field(default_factory=list)


RequestArgs = GetArgs | PostArgs


# =============================================================================
# Client and body construction
# =============================================================================


def build_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the AsyncClient used for a single invocation.

    Uses httpx's default timeout and follows redirects.

    Args:
        transport: Optional transport override (used by tests)

    Returns:
        Configured httpx.AsyncClient
    """
    from httpie_lite import __version__

    return httpx.AsyncClient(
        follow_redirects=True,
        headers={"User-Agent": f"httpie-lite/{__version__}"},
        transport=transport,
    )


def build_body(pairs: Iterable[KvPair]) -> dict[str, str]:
    """Collect pairs into a JSON object; a repeated key keeps its last value."""
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


# =============================================================================
# Dispatch
# =============================================================================


async def get(client: httpx.AsyncClient, args: GetArgs) -> ResponseView:
    """Send a GET request with no body.

    Raises:
        NetworkError: On connection, TLS, timeout or protocol failure
    """
    _LOGGER.debug("GET %s", args.url)
    try:
        response = await client.get(args.url)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise NetworkError(args.url, str(e) or type(e).__name__) from e
    _LOGGER.debug("Received %s %s", response.status_code, response.reason_phrase)
    return ResponseView.from_response(response)


async def post(client: httpx.AsyncClient, args: PostArgs) -> ResponseView:
    """Send a POST request with the pairs serialized as a JSON object.

    httpx sets Content-Type: application/json for json= bodies.

    Raises:
        NetworkError: On connection, TLS, timeout or protocol failure
    """
    body = build_body(args.body)
    _LOGGER.debug("POST %s with %d field(s)", args.url, len(body))
    try:
        response = await client.post(args.url, json=body)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise NetworkError(args.url, str(e) or type(e).__name__) from e
    _LOGGER.debug("Received %s %s", response.status_code, response.reason_phrase)
    return ResponseView.from_response(response)


async def dispatch_request(client: httpx.AsyncClient, args: RequestArgs) -> ResponseView:
    """Send the request described by args."""
    if isinstance(args, GetArgs):
        return await get(client, args)
    if isinstance(args, PostArgs):
        return await post(client, args)
    raise TypeError(f"Unsupported request arguments: {type(args).__name__}")


def send(args: RequestArgs, transport: httpx.AsyncBaseTransport | None = None) -> ResponseView:
    """Send one request on a fresh event loop and return the response.

    Args:
        args: GetArgs or PostArgs
        transport: Optional transport override (used by tests)

    Returns:
        ResponseView of the fully read response

    Raises:
        NetworkError: If no response could be obtained
    """

    async def _run() -> ResponseView:
        async with build_client(transport) as client:
            return await dispatch_request(client, args)

    return asyncio.run(_run())
