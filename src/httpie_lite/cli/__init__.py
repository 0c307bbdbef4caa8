"""CLI for httpie-lite.

This module provides a Typer-based CLI with one command per HTTP method.
"""

from __future__ import annotations
