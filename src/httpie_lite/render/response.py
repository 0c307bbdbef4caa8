"""Response rendering for the terminal.

Output layout:

    HTTP/1.1 200 OK
    content-type: application/json
    content-length: 8

    {
      "x": 1
    }

The status line and header names are styled with ANSI colours. typer.echo
strips the styling when stdout is not a terminal.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import httpx
import typer

_LOGGER = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass
class ResponseView:
    """The parts of an HTTP response that get rendered.

    Attributes:
        http_version: Protocol version, e.g. "HTTP/1.1"
        status_code: Numeric status code
        reason: Reason phrase, e.g. "OK"
        headers: (name, value) pairs in the order the server sent them
        body: Decoded response body
    """

    http_version: str
    status_code: int
    reason: str
    headers: list[tuple[str, str]]
    body: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> ResponseView:
        """Build a view from a fully read httpx response."""
        return cls(
            http_version=response.http_version,
            status_code=response.status_code,
            reason=response.reason_phrase,
            headers=list(response.headers.multi_items()),
            body=response.text,
        )

    @property
    def content_type(self) -> str | None:
        """Media type from the Content-Type header, lower-cased, without parameters."""
        for name, value in self.headers:
            if name.lower() == "content-type":
                media_type = value.split(";", 1)[0].strip().lower()
                return media_type or None
        return None


def format_status_line(view: ResponseView, color: bool = True) -> str:
    """Format "<HTTP-version> <status-code> <reason>"."""
    line = f"{view.http_version} {view.status_code} {view.reason}".rstrip()
    if color:
        return typer.style(line, fg=typer.colors.BLUE, bold=True)
    return line


def format_headers(view: ResponseView, color: bool = True) -> list[str]:
    """Format one "<name>: <value>" line per header, preserving order."""
    lines = []
    for name, value in view.headers:
        styled_name = typer.style(name, fg=typer.colors.GREEN) if color else name
        lines.append(f"{styled_name}: {value}")
    return lines


def format_body(view: ResponseView) -> str:
    """Pretty-print JSON bodies, leave everything else untouched.

    A body that claims to be JSON but cannot be re-encoded as strict JSON
    (malformed, too deeply nested, NaN or out-of-range numbers) is returned as-is.
    """
    if view.content_type != JSON_CONTENT_TYPE:
        return view.body

    try:
        data = json.loads(view.body)
        return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    except (ValueError, RecursionError) as e:
        _LOGGER.debug("Response body is not printable as JSON, printing raw: %s", e)
        return view.body


def render_response(view: ResponseView) -> None:
    """Write status line, headers and body to stdout.

    Args:
        view: Response to render
    """
    typer.echo(format_status_line(view))
    for line in format_headers(view):
        typer.echo(line)
    typer.echo()

    body = format_body(view)
    if body:
        typer.echo(body)
