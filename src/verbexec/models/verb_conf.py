"""Configuration models for verb definitions."""

from pydantic import BaseModel, Field


class VerbConf(BaseModel):
    """One verb, as written in the configuration file."""

    invocation: str | None = None
    execution: str
    key: str | None = None
    shortcut: str | None = None
    description: str | None = None
    from_shell: bool | None = None
    leave_app: bool | None = None


class VerbexecConfig(BaseModel):
    """Runtime configuration for verbexec."""

    verbs: list[VerbConf] = Field(default_factory=list)
