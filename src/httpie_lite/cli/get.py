"""Get command for httpie-lite CLI."""

from __future__ import annotations

from typing import Annotated

import typer

from httpie_lite.cli._params import url_callback


def get(
    url: Annotated[
        str,
        typer.Argument(help="Absolute URL to request", callback=url_callback),
    ],
) -> None:
    """Send a GET request and print the response.

    Args:
        url: Absolute URL to request

    Example:
        httpie-lite get https://httpbin.org/get
    """
    from httpie_lite.render import render_response
    from httpie_lite.request.dispatch import GetArgs, NetworkError, send

    try:
        view = send(GetArgs(url=url))
    except NetworkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    render_response(view)
