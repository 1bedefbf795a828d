"""Unit tests for verbexec.verb and verbexec.external_execution."""

from pathlib import Path

import pytest

from verbexec.errors import ConfError, InvalidVerbConfError, UnknownInternalError
from verbexec.execution_builder import ExecutionStringBuilder
from verbexec.external_execution import ExternalExecution, ExternalExecutionMode
from verbexec.internal import Internal
from verbexec.internal_execution import InternalExecution
from verbexec.invocation import VerbInvocation
from verbexec.models import Selection, VerbConf
from verbexec.verb import Verb, load_verbs


class TestExternalExecutionMode:
    def test_from_conf(self):
        assert ExternalExecutionMode.from_conf(True, None) is ExternalExecutionMode.FROM_PARENT_SHELL
        assert ExternalExecutionMode.from_conf(None, True) is ExternalExecutionMode.LEAVE_APP
        assert ExternalExecutionMode.from_conf(None, None) is ExternalExecutionMode.STAY_IN_APP

    def test_predicates(self):
        assert ExternalExecutionMode.FROM_PARENT_SHELL.is_from_shell()
        assert ExternalExecutionMode.FROM_PARENT_SHELL.is_leave_app()
        assert ExternalExecutionMode.LEAVE_APP.is_leave_app()
        assert not ExternalExecutionMode.STAY_IN_APP.is_leave_app()


class TestExternalExecution:
    def test_build_tokens_by_default(self):
        builder = ExecutionStringBuilder.from_selection(Selection(path=Path("/a b")))
        assert ExternalExecution("vi {file}").build(builder) == ["vi", "/a b"]

    def test_build_shell_string_from_shell(self):
        builder = ExecutionStringBuilder.from_selection(Selection(path=Path("/a b")))
        execution = ExternalExecution("vi {file}", ExternalExecutionMode.FROM_PARENT_SHELL)
        assert execution.build(builder) == "vi '/a b'"


class TestVerbFromConf:
    def test_external_verb(self):
        verb = Verb.from_conf(VerbConf(invocation="edit", execution="vi +{line} {file}"))
        assert verb.name == "edit"
        assert verb.execution == ExternalExecution("vi +{line} {file}")
        assert verb.description == "`vi +{line} {file}`"

    def test_internal_verb_takes_internal_name(self):
        verb = Verb.from_conf(VerbConf(execution=":toggle_hidden"))
        assert verb.name == "toggle_hidden"
        assert verb.execution == InternalExecution.from_internal(Internal.TOGGLE_HIDDEN)
        assert verb.description == Internal.TOGGLE_HIDDEN.description

    def test_internal_verb_with_arg(self):
        verb = Verb.from_conf(VerbConf(invocation="home", execution=":focus! ~"))
        assert verb.name == "home"
        assert verb.execution == InternalExecution(Internal.FOCUS, True, "~")

    def test_conf_description_wins(self):
        verb = Verb.from_conf(
            VerbConf(invocation="e", execution="vi {file}", description="edit it", key="ctrl-e")
        )
        assert verb.description == "edit it"
        assert verb.key == "ctrl-e"

    def test_unknown_internal(self):
        with pytest.raises(UnknownInternalError):
            Verb.from_conf(VerbConf(invocation="x", execution=":teleport"))

    def test_external_without_invocation(self):
        with pytest.raises(InvalidVerbConfError):
            Verb.from_conf(VerbConf(execution="vi {file}"))

    def test_empty_execution(self):
        with pytest.raises(InvalidVerbConfError):
            Verb.from_conf(VerbConf(invocation="x", execution="  "))

    def test_empty_invocation_name(self):
        with pytest.raises(ConfError):
            Verb.from_conf(VerbConf(invocation=" ", execution="vi {file}"))

    def test_load_verbs(self):
        verbs = load_verbs([VerbConf(execution=":quit"), VerbConf(invocation="e", execution="vi")])
        assert [verb.name for verb in verbs] == ["quit", "e"]


class TestVerbExpand:
    def test_expand_with_invocation_args(self):
        verb = Verb.from_conf(
            VerbConf(invocation="mv {newpath}", execution="mv {file} {newpath:path-from-parent}")
        )
        sel = Selection(path=Path("/home/dys/a.txt"))
        assert verb.expand(sel, invocation_args="b.txt") == [
            "mv",
            "/home/dys/a.txt",
            "/home/dys/b.txt",
        ]

    def test_expand_from_shell(self):
        verb = Verb.from_conf(
            VerbConf(
                invocation="cpo",
                execution="cp {file} {other-panel-directory}",
                from_shell=True,
            )
        )
        sel = Selection(path=Path("/x/a b"))
        assert verb.expand(sel, other_file=Path("/")) == "cp '/x/a b' /"

    def test_expand_internal_verb_fails(self):
        verb = Verb.from_conf(VerbConf(execution=":quit"))
        with pytest.raises(ConfError):
            verb.expand(Selection(path=Path("/a")))

    def test_check_args(self):
        verb = Verb.from_conf(VerbConf(invocation="mv {newpath}", execution="mv {file}"))
        assert verb.check_args(VerbInvocation.from_str("mv x")) is None
        assert verb.check_args(VerbInvocation.from_str("mv")) == "mv {newpath}"
