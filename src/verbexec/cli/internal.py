"""Parsing of an internal execution, as written in verb definitions."""

import argparse
import sys

from verbexec.cli.shared import add_debug_flag, setup_logging
from verbexec.errors import ConfError
from verbexec.internal_execution import InternalExecution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verbexec internal",
        description="Parse an internal execution such as ':focus! ~'",
    )
    add_debug_flag(parser)
    parser.add_argument("invocation", help="Internal invocation, for example ':focus! ~'")
    return parser


def run(argv: list[str]) -> int:
    """Execute internal mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        execution = InternalExecution.try_from(args.invocation)
    except ConfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"  internal: {execution.internal.verb_name}")
    print(f"  description: {execution.internal.description}")
    print("  bang: " + ("true" if execution.bang else "false"))
    print(f"  arg: {execution.arg if execution.arg is not None else '(none)'}")
    desc_code = execution.as_desc_code()
    if desc_code is not None:
        print(f"  code: {desc_code}")
    return 0
