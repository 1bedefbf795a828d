"""Expansion of an execution pattern for a selected file."""

import argparse
import json
import logging
import sys
from pathlib import Path

from verbexec import __version__
from verbexec.cli.shared import add_debug_flag, format_command, setup_logging
from verbexec.errors import ConfError
from verbexec.execution_builder import ExecutionStringBuilder
from verbexec.invocation_parser import InvocationParser
from verbexec.models import Selection

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for expand mode."""
    parser = argparse.ArgumentParser(
        prog="verbexec",
        description="Expand a verb execution pattern for a selected file",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    add_debug_flag(parser)
    parser.add_argument("pattern", help="Execution pattern, for example 'vi +{line} {file}'")
    parser.add_argument("file", type=Path, help="Selected file or directory")
    parser.add_argument("--line", type=int, default=0, help="Line number of the selection")
    parser.add_argument("--other", type=Path, help="Selection of the other panel")
    parser.add_argument(
        "--invocation",
        help="Invocation pattern declaring argument groups, for example 'mv {newname}'",
    )
    parser.add_argument("--args", help="Arguments typed after the verb name")
    parser.add_argument(
        "-t",
        "--tokens",
        action="store_true",
        help="Print the argument vector (JSON) instead of a shell command line",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute expand mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        invocation_parser = InvocationParser(args.invocation) if args.invocation else None
    except ConfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if invocation_parser is not None and args.args is not None:
        if invocation_parser.parse(args.args) is None:
            log.warning("arguments %r don't match invocation %r", args.args, args.invocation)

    sel = Selection.from_path(args.file, line=args.line)
    builder = ExecutionStringBuilder.from_invocation(
        invocation_parser, sel, args.other, args.args
    )
    if args.tokens:
        print(json.dumps(builder.exec_token(args.pattern), ensure_ascii=False))
    else:
        print(format_command(builder.shell_exec_string(args.pattern)))
    return 0
