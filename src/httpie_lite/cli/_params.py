"""Typer argument callbacks shared by the request commands.

Parser errors become typer.BadParameter so they are reported as usage
errors before any request is sent.
"""

from __future__ import annotations

import typer

from httpie_lite.request.parser import (
    InvalidKeyValue,
    InvalidUrl,
    KvPair,
    parse_kv_pairs,
    parse_url,
)


def url_callback(value: str) -> str:
    """Validate the URL argument."""
    try:
        return parse_url(value)
    except InvalidUrl as e:
        raise typer.BadParameter(str(e)) from e


def body_callback(value: list[str] | None) -> list[KvPair]:
    """Parse the key=value body arguments."""
    try:
        return parse_kv_pairs(value or [])
    except InvalidKeyValue as e:
        raise typer.BadParameter(str(e)) from e
