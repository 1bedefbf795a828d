"""Matching of typed arguments against a verb's invocation pattern."""

import logging
import re

from verbexec.errors import InvalidVerbInvocationError
from verbexec.invocation import VerbInvocation
from verbexec.placeholder import GROUP

log = logging.getLogger(__name__)


class InvocationParser:
    """Compiled invocation pattern such as ``mv {newname}``.

    The argument part of the pattern becomes an anchored regex in which
    every ``{name}`` captures one or more characters and the text around
    placeholders must appear literally.
    """

    def __init__(self, invocation_str: str) -> None:
        self.invocation_pattern = VerbInvocation.from_str(invocation_str)
        self.group_names: list[str] = []
        self._args_regex: re.Pattern[str] | None = None
        args = self.invocation_pattern.args
        if args is not None:
            self._args_regex = self._compile(args)

    def _compile(self, args: str) -> re.Pattern[str]:
        parts: list[str] = []
        pos = 0
        for match in GROUP.finditer(args):
            name = match.group(1)
            if match.group(2) is not None:
                log.debug("ignoring format %r of invocation group %r", match.group(2), name)
            if name in self.group_names:
                raise InvalidVerbInvocationError(
                    str(self.invocation_pattern), f"duplicate group {name!r}"
                )
            parts.append(re.escape(args[pos : match.start()]))
            # group names needn't be identifiers, so they're mapped to indices
            parts.append(f"(?P<g{len(self.group_names)}>.+)")
            self.group_names.append(name)
            pos = match.end()
        parts.append(re.escape(args[pos:]))
        source = "^" + "".join(parts) + "$"
        log.debug("invocation %r compiled to %r", args, source)
        return re.compile(source, re.DOTALL)

    @property
    def name(self) -> str:
        return self.invocation_pattern.name

    def takes_args(self) -> bool:
        return self._args_regex is not None

    def parse(self, args: str) -> dict[str, str] | None:
        """Return the captured values keyed by placeholder name, or None when args don't match."""
        if self._args_regex is None:
            return None
        match = self._args_regex.match(args)
        if match is None:
            log.debug("args %r don't match invocation %s", args, self.invocation_pattern)
            return None
        return {name: match.group(f"g{idx}") for idx, name in enumerate(self.group_names)}

    def check_args(self, invocation: VerbInvocation) -> str | None:
        """Return an error message for the user when the invocation's args don't fit."""
        if self._args_regex is None:
            if invocation.args is None:
                return None
            return f"{invocation.name} doesn't take arguments"
        if self._args_regex.match(invocation.args or "") is not None:
            return None
        return self.invocation_pattern.to_string_for_name(invocation.name)
