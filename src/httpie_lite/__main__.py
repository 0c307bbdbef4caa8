"""Entry point for python -m httpie_lite."""

from __future__ import annotations


def main() -> None:
    """Run the CLI application."""
    from httpie_lite.cli.main import app

    app()


if __name__ == "__main__":
    main()
