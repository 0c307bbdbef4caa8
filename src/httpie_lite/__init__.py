"""httpie-lite: a small httpie-style command-line HTTP client.

This library provides tools for:
- Validating URL and key=value arguments
- Sending one GET or POST request with httpx
- Rendering the response (status line, headers, body) to the terminal

Example usage:
    from httpie_lite.request import PostArgs, parse_kv_pairs, send
    from httpie_lite.render import render_response

    args = PostArgs(url="https://httpbin.org/post", body=parse_kv_pairs(["a=1"]))
    render_response(send(args))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Re-export public API for convenience
from httpie_lite.render import ResponseView, render_response
from httpie_lite.request import (
    GetArgs,
    InvalidKeyValue,
    InvalidUrl,
    KvPair,
    NetworkError,
    PostArgs,
    parse_kv_pair,
    parse_url,
    send,
)

__all__ = [
    "__version__",
    "GetArgs",
    "InvalidKeyValue",
    "InvalidUrl",
    "KvPair",
    "NetworkError",
    "PostArgs",
    "ResponseView",
    "parse_kv_pair",
    "parse_url",
    "render_response",
    "send",
]
