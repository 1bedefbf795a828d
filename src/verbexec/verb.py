"""Verbs assembled from their configuration."""

import logging
from dataclasses import dataclass
from pathlib import Path

from verbexec.errors import ConfError, InvalidVerbConfError
from verbexec.execution_builder import ExecutionStringBuilder
from verbexec.external_execution import ExternalExecution, ExternalExecutionMode
from verbexec.internal_execution import InternalExecution
from verbexec.invocation import COMMAND_PREFIX, VerbInvocation
from verbexec.invocation_parser import InvocationParser
from verbexec.models import Selection, VerbConf

log = logging.getLogger(__name__)


@dataclass
class Verb:
    """A configured verb: how it's invoked and what it executes."""

    invocation_parser: InvocationParser
    execution: InternalExecution | ExternalExecution
    key: str | None = None
    shortcut: str | None = None
    conf_description: str | None = None

    @classmethod
    def from_conf(cls, conf: VerbConf) -> "Verb":
        """Build a verb. Raises ConfError when the definition can't be used."""
        execution_str = conf.execution.strip()
        if not execution_str:
            raise InvalidVerbConfError("Verb execution can't be empty")
        execution: InternalExecution | ExternalExecution
        if execution_str.startswith(COMMAND_PREFIX):
            execution = InternalExecution.try_from(execution_str)
        else:
            mode = ExternalExecutionMode.from_conf(conf.from_shell, conf.leave_app)
            execution = ExternalExecution(execution_str, mode)

        invocation = conf.invocation
        if invocation is None:
            if not isinstance(execution, InternalExecution):
                raise InvalidVerbConfError(
                    f"Verb executing {execution_str!r} needs an invocation"
                )
            invocation = execution.internal.verb_name
        invocation_parser = InvocationParser(invocation)
        if not invocation_parser.name:
            raise InvalidVerbConfError(f"Invalid verb invocation: {invocation!r}")

        log.debug("verb %r executes %r", invocation_parser.name, execution_str)
        return cls(
            invocation_parser=invocation_parser,
            execution=execution,
            key=conf.key,
            shortcut=conf.shortcut,
            conf_description=conf.description,
        )

    @property
    def name(self) -> str:
        return self.invocation_parser.name

    @property
    def description(self) -> str:
        if self.conf_description:
            return self.conf_description
        if isinstance(self.execution, InternalExecution):
            return self.execution.internal.description
        return f"`{self.execution.exec_pattern}`"

    def check_args(self, invocation: VerbInvocation) -> str | None:
        return self.invocation_parser.check_args(invocation)

    def expand(
        self,
        sel: Selection,
        other_file: Path | None = None,
        invocation_args: str | None = None,
    ) -> str | list[str]:
        """Build the command of an external verb for the given selection."""
        if not isinstance(self.execution, ExternalExecution):
            raise ConfError(f"Verb {self.name!r} doesn't execute an external program")
        builder = ExecutionStringBuilder.from_invocation(
            self.invocation_parser, sel, other_file, invocation_args
        )
        return self.execution.build(builder)


def load_verbs(confs: list[VerbConf]) -> list[Verb]:
    return [Verb.from_conf(conf) for conf in confs]
