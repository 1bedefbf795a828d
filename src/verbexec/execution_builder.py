"""Expansion of verb execution patterns into shell strings or argument vectors.

Standard placeholders (``{file}``, ``{line}``, ``{other-panel-directory}``...)
are taken from the selection context, any other name from the values the
invocation parser captured. A placeholder which can't be resolved is left
as typed, so that a bad verb definition shows up in the resulting command
instead of aborting it.
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path

from verbexec import path_utils
from verbexec.invocation_parser import InvocationParser
from verbexec.models import Selection
from verbexec.placeholder import GROUP, PathFormat, Placeholder, StandardPlaceholder
from verbexec.splitting import split_unquoted_whitespace

log = logging.getLogger(__name__)


class ExecutionStringBuilder:
    """Gathers a selection and invocation values to build an executable command."""

    def __init__(
        self,
        sel: Selection,
        other_file: Path | None = None,
        invocation_values: dict[str, str] | None = None,
    ) -> None:
        self.sel = sel
        self.other_file = other_file
        self.invocation_values = invocation_values
        self._standard: dict[StandardPlaceholder, Callable[[bool], str | None]] = {
            StandardPlaceholder.LINE: lambda escape: str(self.sel.line),
            StandardPlaceholder.FILE: lambda escape: self._path_to_string(
                self.sel.path, escape
            ),
            StandardPlaceholder.DIRECTORY: lambda escape: self._path_to_string(
                self._directory(), escape
            ),
            StandardPlaceholder.PARENT: lambda escape: self._path_to_string(
                self._parent(), escape
            ),
            StandardPlaceholder.OTHER_PANEL_FILE: self._other_panel_file,
            StandardPlaceholder.OTHER_PANEL_DIRECTORY: self._other_panel_directory,
            StandardPlaceholder.OTHER_PANEL_PARENT: self._other_panel_parent,
        }

    @classmethod
    def from_selection(cls, sel: Selection) -> "ExecutionStringBuilder":
        return cls(sel)

    @classmethod
    def from_invocation(
        cls,
        invocation_parser: InvocationParser | None,
        sel: Selection,
        other_file: Path | None,
        invocation_args: str | None,
    ) -> "ExecutionStringBuilder":
        invocation_values = None
        if invocation_parser is not None and invocation_args is not None:
            invocation_values = invocation_parser.parse(invocation_args)
        return cls(sel, other_file=other_file, invocation_values=invocation_values)

    def _directory(self) -> Path:
        return path_utils.closest_dir(self.sel.path)

    def _parent(self) -> Path:
        return self.sel.path.parent

    @staticmethod
    def _path_to_string(path: Path, escape: bool) -> str:
        if escape:
            return path_utils.escape_for_shell(path)
        return str(path)

    def _other_panel_file(self, escape: bool) -> str | None:
        if self.other_file is None:
            return None
        return self._path_to_string(self.other_file, escape)

    def _other_panel_directory(self, escape: bool) -> str | None:
        if self.other_file is None:
            return None
        return self._path_to_string(path_utils.closest_dir(self.other_file), escape)

    def _other_panel_parent(self, escape: bool) -> str | None:
        if self.other_file is None:
            return None
        return self._path_to_string(self.other_file.parent, escape)

    def _invocation_replacement(self, placeholder: Placeholder) -> str | None:
        if self.invocation_values is None:
            return None
        value = self.invocation_values.get(placeholder.name)
        if value is None:
            return None
        if placeholder.format is None:
            return value
        path_format = placeholder.path_format
        if path_format is PathFormat.PATH_FROM_DIRECTORY:
            return path_utils.path_str_from(self._directory(), value)
        if path_format is PathFormat.PATH_FROM_PARENT:
            return path_utils.path_str_from(self._parent(), value)
        log.debug("invalid format %r for placeholder %r", placeholder.format, placeholder.name)
        return f"invalid format: {placeholder.format!r}"

    def raw_replacement(self, placeholder: Placeholder, escape: bool) -> str | None:
        """Return the text replacing the placeholder, or None when it can't be resolved."""
        standard = placeholder.standard
        if standard is not None:
            return self._standard[standard](escape)
        return self._invocation_replacement(placeholder)

    def _capture_replacement(self, match: re.Match[str], escape: bool) -> str:
        replacement = self.raw_replacement(Placeholder.from_match(match), escape)
        if replacement is None:
            log.debug("leaving unresolved placeholder %s", match.group(0))
            return match.group(0)
        return replacement

    def _replace_all(self, text: str, escape: bool) -> str:
        return GROUP.sub(lambda m: self._capture_replacement(m, escape), text)

    def shell_exec_string(self, exec_pattern: str) -> str:
        """Build a command line for a shell, with paths escaped."""
        replaced = self._replace_all(exec_pattern, escape=True)
        tokens = split_unquoted_whitespace(replaced, unwrap_quotes=True, keep_quoted_runs=True)
        return " ".join(_canonical_token(token) for token in tokens)

    def exec_token(self, exec_pattern: str) -> list[str]:
        """Build the arguments to give to a process launcher, without any shell.

        The pattern is split before replacement, so a replaced value containing
        spaces stays one argument.
        """
        return [
            self._replace_all(token, escape=False)
            for token in split_unquoted_whitespace(exec_pattern, unwrap_quotes=True)
        ]


def _canonical_token(token: str) -> str:
    """Return the token, checking whether it names an existing path.

    The text of the token is never rewritten: `./build.sh` must stay a
    relative path and not become a command looked up in PATH.
    """
    if not token:
        return token
    try:
        exists = Path(token).exists()
    except (OSError, ValueError):
        return token
    if exists:
        log.debug("token %r names an existing path", token)
    return token
