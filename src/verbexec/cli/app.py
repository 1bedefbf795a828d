"""Top-level CLI router."""

import sys

from . import expand as expand_cmd
from . import internal as internal_cmd
from . import verbs as verbs_cmd


def main(argv: list[str] | None = None) -> int:
    """Route to expand mode (the default), internal mode or verbs mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "internal":
        return internal_cmd.run(args[1:])
    if args and args[0] == "verbs":
        return verbs_cmd.run(args[1:])
    if args and args[0] == "expand":
        args = args[1:]
    return expand_cmd.run(args)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
