"""Shared terminal styling constants."""

BOLD = "\033[1m"
CYAN = "\033[36m"
RESET = "\033[0m"
