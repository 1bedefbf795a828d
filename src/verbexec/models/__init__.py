"""Model package for verbexec."""

from verbexec.models.selection import Selection, SelectionType
from verbexec.models.verb_conf import VerbConf, VerbexecConfig

__all__ = [
    "Selection",
    "SelectionType",
    "VerbConf",
    "VerbexecConfig",
]
