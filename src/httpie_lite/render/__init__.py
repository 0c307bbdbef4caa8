"""Terminal rendering of HTTP responses."""

from __future__ import annotations

from httpie_lite.render.response import (
    JSON_CONTENT_TYPE,
    ResponseView,
    format_body,
    format_headers,
    format_status_line,
    render_response,
)

__all__ = [
    "JSON_CONTENT_TYPE",
    "ResponseView",
    "format_body",
    "format_headers",
    "format_status_line",
    "render_response",
]
