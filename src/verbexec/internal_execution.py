"""Verb executions targeting a built-in command."""

from dataclasses import dataclass

from verbexec.internal import Internal
from verbexec.invocation import BANG, COMMAND_PREFIX, VerbInvocation


@dataclass(frozen=True)
class InternalExecution:
    """An internal, whether to open its result in a new panel, and its argument.

    ``:focus! ~`` gives the ``focus`` internal, bang set and ``~`` as argument.
    """

    internal: Internal
    bang: bool = False
    arg: str | None = None

    @classmethod
    def from_internal(cls, internal: Internal) -> "InternalExecution":
        return cls(internal)

    @classmethod
    def from_internal_bang(cls, internal: Internal, bang: bool) -> "InternalExecution":
        return cls(internal, bang=bang)

    @classmethod
    def try_from(cls, invocation_str: str) -> "InternalExecution":
        """Parse an invocation naming an internal. Raises UnknownInternalError."""
        invocation = VerbInvocation.from_str(invocation_str)
        internal = Internal.try_from(invocation.name)
        return cls(internal, bang=invocation.bang, arg=invocation.args)

    def as_desc_code(self) -> str | None:
        """Render as typed (``:name[!] arg``), only when there's an argument.

        Parsing the result gives back this execution, except for an argument
        which is empty or has surrounding whitespace: parsing strips it.
        """
        if self.arg is None:
            return None
        bang = BANG if self.bang else ""
        return f"{COMMAND_PREFIX}{self.internal.verb_name}{bang} {self.arg}"
