"""Command-line entry points for ask."""

from ask.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
