"""Command-line argument validation.

This module turns raw command-line tokens into request inputs:
- URLs must be absolute (scheme and host) and are returned unchanged
- key=value tokens become KvPair instances, split on the first '='
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class InvalidUrl(ValueError):
    """Raised when a URL argument is not a well-formed absolute URL."""


class InvalidKeyValue(ValueError):
    """Raised when a body argument is not of the form key=value."""


@dataclass(frozen=True)
class KvPair:
    """A key/value pair parsed from a key=value token.

    Attributes:
        key: Text before the first '='
        value: Text after the first '=' (may be empty or contain '=')
    """

    key: str
    value: str


def parse_url(s: str) -> str:
    """Validate that a string is an absolute URL.

    Examples:
    - "https://example.com/status/200" -> accepted
    - "http://localhost:8080/api?q=1" -> accepted
    - "not-a-url" -> InvalidUrl (no scheme)
    - "http://" -> InvalidUrl (no host)
    - "http://example.com:99999" -> InvalidUrl (port out of range)

    Args:
        s: Candidate URL

    Returns:
        The input string, unchanged

    Raises:
        InvalidUrl: If the string is not an absolute URL with a host
    """
    if not s or any(ch.isspace() for ch in s):
        raise InvalidUrl(f"Invalid URL: {s!r}")

    try:
        parts = urlsplit(s)
        # Accessing .port validates it
        parts.port  # noqa: B018
    except ValueError as e:
        raise InvalidUrl(f"Invalid URL {s!r}: {e}") from e

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        raise InvalidUrl(f"Invalid URL {s!r}: missing scheme")
    if not parts.hostname:
        raise InvalidUrl(f"Invalid URL {s!r}: missing host")

    try:
        httpx.URL(s)
    except httpx.InvalidURL as e:
        raise InvalidUrl(f"Invalid URL {s!r}: {e}") from e

    return s


def parse_kv_pair(s: str) -> KvPair:
    """Split a key=value token on its first '='.

    Args:
        s: Token such as "name=alice"

    Returns:
        KvPair with the text before and after the first '='

    Raises:
        InvalidKeyValue: If the token contains no '='
    """
    key, sep, value = s.partition("=")
    if not sep:
        raise InvalidKeyValue(f"Failed to parse {s!r}: expected key=value")
    return KvPair(key=key, value=value)


def parse_kv_pairs(tokens: Iterable[str]) -> list[KvPair]:
    """Parse key=value tokens in order, failing on the first bad one."""
    return [parse_kv_pair(token) for token in tokens]
