"""Shared CLI helpers."""

import argparse
import logging
import os
import sys

from verbexec.constants import BOLD, CYAN, RESET


def add_debug_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def format_command(command: str) -> str:
    """Return a shell-like prompt line for a built command."""
    if supports_color():
        return f"{BOLD}{CYAN}$ {command}{RESET}"
    return f"$ {command}"
