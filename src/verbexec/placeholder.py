"""Placeholder grammar shared by invocation and execution patterns.

A placeholder is either ``{name}`` or ``{name:format}``. Neither part may
contain ``{``, ``}`` or ``:``; anything that doesn't fit this shape is
plain text and passes through untouched.
"""

import re
from dataclasses import dataclass
from enum import Enum

# Group 1 is the name, group 2 the optional format.
GROUP = re.compile(r"\{([^{}:]+)(?::([^{}:]+))?\}")


class StandardPlaceholder(Enum):
    """Names resolved from the selection context rather than the invocation."""

    LINE = "line"
    FILE = "file"
    DIRECTORY = "directory"
    PARENT = "parent"
    OTHER_PANEL_FILE = "other-panel-file"
    OTHER_PANEL_DIRECTORY = "other-panel-directory"
    OTHER_PANEL_PARENT = "other-panel-parent"

    @classmethod
    def from_name(cls, name: str) -> "StandardPlaceholder | None":
        try:
            return cls(name)
        except ValueError:
            return None


class PathFormat(Enum):
    """How a captured invocation value is turned into a path."""

    PATH_FROM_DIRECTORY = "path-from-directory"
    PATH_FROM_PARENT = "path-from-parent"


@dataclass(frozen=True)
class Placeholder:
    name: str
    format: str | None = None

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "Placeholder":
        return cls(name=match.group(1), format=match.group(2))

    @property
    def standard(self) -> StandardPlaceholder | None:
        return StandardPlaceholder.from_name(self.name)

    @property
    def path_format(self) -> PathFormat | None:
        """Return the parsed format, or None when absent or not recognized."""
        if self.format is None:
            return None
        try:
            return PathFormat(self.format)
        except ValueError:
            return None


def find_placeholders(pattern: str) -> list[Placeholder]:
    """Return the placeholders of a pattern, in order of appearance."""
    return [Placeholder.from_match(m) for m in GROUP.finditer(pattern)]
