"""Parsing of what the user types to invoke a verb."""

from dataclasses import dataclass

BANG = "!"
COMMAND_PREFIX = ":"


@dataclass(frozen=True)
class VerbInvocation:
    """A verb name with an optional bang and the raw, unparsed arguments.

    ``focus! ~`` gives name ``focus``, bang set and args ``~``. A leading
    ``:`` is the typed command prefix and isn't part of the name.
    """

    name: str
    bang: bool = False
    args: str | None = None

    @classmethod
    def from_str(cls, invocation: str) -> "VerbInvocation":
        text = invocation.strip()
        if text.startswith(COMMAND_PREFIX):
            text = text[1:].lstrip()
        parts = text.split(maxsplit=1)
        if not parts:
            return cls(name="")
        name = parts[0]
        args = parts[1] if len(parts) > 1 else None
        bang = False
        if name.endswith(BANG):
            name, bang = name[:-1], True
        elif name.startswith(BANG):
            name, bang = name[1:], True
        return cls(name=name, bang=bang, args=args)

    def is_empty(self) -> bool:
        return not self.name

    def to_string_for_name(self, name: str) -> str:
        """Render with another name, as a usage hint for this invocation."""
        rendered = f"{name}{BANG if self.bang else ''}"
        if self.args is not None:
            rendered += f" {self.args}"
        return rendered

    def __str__(self) -> str:
        return self.to_string_for_name(self.name)
