"""Request building and dispatch.

This module provides:
- Validation of URL and key=value command-line arguments
- The GetArgs/PostArgs request variants
- One-shot dispatch of a request with httpx
"""

from __future__ import annotations

from httpie_lite.request.dispatch import (
    GetArgs,
    NetworkError,
    PostArgs,
    RequestArgs,
    build_body,
    build_client,
    dispatch_request,
    get,
    post,
    send,
)
from httpie_lite.request.parser import (
    InvalidKeyValue,
    InvalidUrl,
    KvPair,
    parse_kv_pair,
    parse_kv_pairs,
    parse_url,
)

__all__ = [
    # Argument parsing
    "KvPair",
    "InvalidUrl",
    "InvalidKeyValue",
    "parse_url",
    "parse_kv_pair",
    "parse_kv_pairs",
    # Dispatch
    "GetArgs",
    "PostArgs",
    "RequestArgs",
    "NetworkError",
    "build_body",
    "build_client",
    "dispatch_request",
    "get",
    "post",
    "send",
]
