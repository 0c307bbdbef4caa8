"""Post command for httpie-lite CLI - sends key=value pairs as a JSON object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, cast

import typer

from httpie_lite.cli._params import body_callback, url_callback

if TYPE_CHECKING:
    from httpie_lite.request.parser import KvPair


def post(
    url: Annotated[
        str,
        typer.Argument(help="Absolute URL to request", callback=url_callback),
    ],
    body: Annotated[
        list[str] | None,
        typer.Argument(
            help="Body fields as key=value (sent as a JSON object)",
            callback=body_callback,
            show_default=False,
        ),
    ] = None,
) -> None:
    """Send a POST request with a JSON body and print the response.

    Each key=value argument becomes a string field of the JSON object.
    If a key is repeated, the last value wins.

    Args:
        url: Absolute URL to request
        body: key=value pairs, already parsed by the argument callback

    Example:
        httpie-lite post https://httpbin.org/post name=alice role=admin
    """
    from httpie_lite.render import render_response
    from httpie_lite.request.dispatch import NetworkError, PostArgs, send

    # body_callback has already replaced the raw tokens with KvPair instances
    pairs = cast("list[KvPair]", body or [])

    try:
        view = send(PostArgs(url=url, body=pairs))
    except NetworkError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    render_response(view)
