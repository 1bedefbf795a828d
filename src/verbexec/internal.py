"""Catalog of the built-in commands a verb can execute."""

from enum import Enum

from verbexec.errors import UnknownInternalError


class Internal(Enum):
    """Built-in commands, valued by the name used in verb executions."""

    BACK = "back"
    CLOSE_PANEL_OK = "close_panel_ok"
    CLOSE_PANEL_CANCEL = "close_panel_cancel"
    COPY_PATH = "copy_path"
    FOCUS = "focus"
    HELP = "help"
    LINE_DOWN = "line_down"
    LINE_UP = "line_up"
    OPEN_LEAVE = "open_leave"
    OPEN_STAY = "open_stay"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    PANEL_LEFT = "panel_left"
    PANEL_RIGHT = "panel_right"
    PARENT = "parent"
    PRINT_PATH = "print_path"
    PRINT_RELATIVE_PATH = "print_relative_path"
    PRINT_TREE = "print_tree"
    QUIT = "quit"
    REFRESH = "refresh"
    SELECT_FIRST = "select_first"
    SELECT_LAST = "select_last"
    START_END_PANEL = "start_end_panel"
    TOGGLE_DATES = "toggle_dates"
    TOGGLE_FILES = "toggle_files"
    TOGGLE_GIT_IGNORE = "toggle_git_ignore"
    TOGGLE_HIDDEN = "toggle_hidden"
    TOGGLE_PERM = "toggle_perm"
    TOGGLE_SIZES = "toggle_sizes"
    TOTAL_SEARCH = "total_search"
    UP_TREE = "up_tree"

    @classmethod
    def try_from(cls, verb: str) -> "Internal":
        try:
            return cls(verb)
        except ValueError:
            raise UnknownInternalError(verb) from None

    @property
    def verb_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[Internal, str] = {
    Internal.BACK: "revert to the previous state (mapped to *esc*)",
    Internal.CLOSE_PANEL_OK: "close the panel, validating the selected path",
    Internal.CLOSE_PANEL_CANCEL: "close the panel, not using the selected path",
    Internal.COPY_PATH: "copy path to system clipboard",
    Internal.FOCUS: "display the directory (mapped to *enter*)",
    Internal.HELP: "display help",
    Internal.LINE_DOWN: "move one line down",
    Internal.LINE_UP: "move one line up",
    Internal.OPEN_LEAVE: "open file or directory according to OS settings (quit)",
    Internal.OPEN_STAY: "open file or directory according to OS settings (stay)",
    Internal.PAGE_DOWN: "scroll one page down",
    Internal.PAGE_UP: "scroll one page up",
    Internal.PANEL_LEFT: "focus the panel on the left",
    Internal.PANEL_RIGHT: "focus the panel on the right",
    Internal.PARENT: "move to the parent directory",
    Internal.PRINT_PATH: "print path and leave",
    Internal.PRINT_RELATIVE_PATH: "print relative path and leave",
    Internal.PRINT_TREE: "print tree and leave",
    Internal.QUIT: "quit",
    Internal.REFRESH: "refresh tree and clear size cache",
    Internal.SELECT_FIRST: "select the first item",
    Internal.SELECT_LAST: "select the last item",
    Internal.START_END_PANEL: "start or end a panel",
    Internal.TOGGLE_DATES: "toggle showing last modified dates",
    Internal.TOGGLE_FILES: "toggle showing files (or just folders)",
    Internal.TOGGLE_GIT_IGNORE: "toggle use of .gitignore",
    Internal.TOGGLE_HIDDEN: "toggle showing hidden files",
    Internal.TOGGLE_PERM: "toggle showing file permissions",
    Internal.TOGGLE_SIZES: "toggle showing sizes",
    Internal.TOTAL_SEARCH: "search again but on all children",
    Internal.UP_TREE: "focus the parent of the current root",
}
