"""Main CLI entry point for httpie-lite.

Provides commands for:
- get: Send a GET request
- post: Send a POST request with a JSON body built from key=value pairs
"""

from __future__ import annotations

import logging

import typer

from httpie_lite.cli.get import get
from httpie_lite.cli.post import post

app = typer.Typer(
    name="httpie-lite",
    help="A small httpie-style HTTP client.",
    no_args_is_help=True,
)

app.command(name="get", help="Send a GET request to a URL")(get)
app.command(name="post", help="Send a POST request with a JSON body")(post)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: True if --version flag was provided
    """
    if value:
        from httpie_lite import __version__

        typer.echo(f"httpie-lite {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug information to stderr.",
    ),
) -> None:
    r"""A small httpie-style HTTP client.

    \b
    Examples:
        httpie-lite get https://httpbin.org/get
        httpie-lite post https://httpbin.org/post name=alice role=admin
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


if __name__ == "__main__":
    app()
