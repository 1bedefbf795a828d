"""Configuration errors raised while resolving verbs."""


class ConfError(Exception):
    """A verb definition or configuration file can't be used."""


class UnknownInternalError(ConfError):
    def __init__(self, verb: str) -> None:
        super().__init__(f"Not a known internal: {verb!r}")
        self.verb = verb


class InvalidVerbInvocationError(ConfError):
    def __init__(self, invocation: str, reason: str = "") -> None:
        message = f"Invalid verb invocation: {invocation!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.invocation = invocation


class InvalidVerbConfError(ConfError):
    pass
