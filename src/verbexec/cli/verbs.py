"""Listing of the configured verbs."""

import argparse
import sys
from pathlib import Path

from verbexec.cli.shared import add_debug_flag, setup_logging
from verbexec.config import config_path, load_config
from verbexec.errors import ConfError
from verbexec.verb import load_verbs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verbexec verbs",
        description="Check and list the verbs of the configuration file",
    )
    add_debug_flag(parser)
    parser.add_argument("--config", type=Path, help="Configuration file to read")
    return parser


def run(argv: list[str]) -> int:
    """Execute verbs mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    path = args.config or config_path()
    try:
        verbs = load_verbs(load_config(path).verbs)
    except ConfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not verbs:
        print(f"No verbs defined in {path}")
        return 0
    width = max(len(verb.name) for verb in verbs)
    for verb in verbs:
        print(f"  {verb.name:<{width}}  {verb.description}")
    return 0
