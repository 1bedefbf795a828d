"""verbexec - verb execution templating."""

__version__ = "0.3.0"
