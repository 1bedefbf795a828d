"""Selection model: the filesystem entry a verb is applied to."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SelectionType(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class Selection:
    """The selected entry: its path, an optional line number and its kind."""

    path: Path
    line: int = 0
    stype: SelectionType = SelectionType.FILE
    is_exe: bool = False

    @classmethod
    def from_path(cls, path: Path, line: int = 0) -> "Selection":
        """Build a selection by looking at the entry on disk."""
        if path.is_dir():
            stype = SelectionType.DIRECTORY
        elif path.is_file():
            stype = SelectionType.FILE
        else:
            stype = SelectionType.OTHER
        is_exe = stype is SelectionType.FILE and os.access(path, os.X_OK)
        return cls(path=path, line=line, stype=stype, is_exe=is_exe)
