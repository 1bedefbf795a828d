"""Verb executions launching an external program."""

from dataclasses import dataclass
from enum import Enum

from verbexec.execution_builder import ExecutionStringBuilder


class ExternalExecutionMode(Enum):
    FROM_PARENT_SHELL = "from_parent_shell"
    LEAVE_APP = "leave_app"
    STAY_IN_APP = "stay_in_app"

    @classmethod
    def from_conf(
        cls, from_shell: bool | None, leave_app: bool | None
    ) -> "ExternalExecutionMode":
        if from_shell:
            return cls.FROM_PARENT_SHELL
        if leave_app:
            return cls.LEAVE_APP
        return cls.STAY_IN_APP

    def is_from_shell(self) -> bool:
        return self is ExternalExecutionMode.FROM_PARENT_SHELL

    def is_leave_app(self) -> bool:
        return self is not ExternalExecutionMode.STAY_IN_APP


@dataclass(frozen=True)
class ExternalExecution:
    exec_pattern: str
    exec_mode: ExternalExecutionMode = ExternalExecutionMode.STAY_IN_APP

    def build(self, builder: ExecutionStringBuilder) -> str | list[str]:
        """Return a shell command line when run from the shell, else the argument vector."""
        if self.exec_mode.is_from_shell():
            return builder.shell_exec_string(self.exec_pattern)
        return builder.exec_token(self.exec_pattern)
