"""Path helpers used when expanding execution patterns."""

import os
import re
import shlex
from pathlib import Path

TILDE_RE = re.compile(r"^~(/|$)")


def closest_dir(path: Path) -> Path:
    """Return path when it's a directory, else its closest existing ancestor directory."""
    current = path
    while True:
        if current.is_dir():
            return current
        parent = current.parent
        if parent == current:
            return current
        current = parent


def escape_for_shell(path: Path) -> str:
    """Return path as one shell word, single-quoted only when needed."""
    return shlex.quote(str(path))


def normalize_path(path: Path) -> Path:
    """Resolve `.` and `..` lexically, without touching the filesystem."""
    return Path(os.path.normpath(path))


def path_from(base_dir: Path, input_str: str) -> Path:
    """Interpret input_str as a path, relative to base_dir unless absolute or home-based."""
    if input_str.startswith("/"):
        return Path(input_str)
    if TILDE_RE.match(input_str):
        return Path(os.path.expanduser(input_str))
    return normalize_path(base_dir / input_str)


def path_str_from(base_dir: Path, input_str: str) -> str:
    return str(path_from(base_dir, input_str))
