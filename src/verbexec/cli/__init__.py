"""Command-line interface for verbexec."""

from verbexec.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
