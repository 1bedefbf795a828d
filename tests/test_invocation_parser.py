"""Unit tests for verbexec.invocation_parser."""

import pytest

from verbexec.errors import ConfError, InvalidVerbInvocationError
from verbexec.invocation import VerbInvocation
from verbexec.invocation_parser import InvocationParser


class TestParse:
    def test_single_group_captures_everything(self):
        parser = InvocationParser("mv {newname}")
        assert parser.name == "mv"
        assert parser.parse("new name.txt") == {"newname": "new name.txt"}

    def test_group_names_need_not_be_identifiers(self):
        parser = InvocationParser("cp {new-path}")
        assert parser.parse("x") == {"new-path": "x"}

    def test_literal_segments_must_match(self):
        parser = InvocationParser("e {arg} to {dest}")
        assert parser.parse("a b to c") == {"arg": "a b", "dest": "c"}
        assert parser.parse("a b into c") is None

    def test_literal_segments_are_not_regex(self):
        parser = InvocationParser("grep {a}.{b}")
        assert parser.parse("xy") is None
        assert parser.parse("x.y") == {"a": "x", "b": "y"}

    def test_empty_args_do_not_match_a_group(self):
        assert InvocationParser("mv {newname}").parse("") is None

    def test_no_args_pattern_gives_no_mapping(self):
        parser = InvocationParser("quit")
        assert not parser.takes_args()
        assert parser.parse("anything") is None

    def test_format_in_invocation_is_ignored(self):
        parser = InvocationParser("mv {newpath:path-from-parent}")
        assert parser.parse("x") == {"newpath": "x"}

    def test_duplicate_group_is_a_conf_error(self):
        with pytest.raises(InvalidVerbInvocationError):
            InvocationParser("cp {a} {a}")

    def test_invalid_invocation_is_a_conf_error(self):
        with pytest.raises(ConfError):
            InvocationParser("cp {a} {a}")


class TestCheckArgs:
    def test_no_args_expected_and_none_given(self):
        assert InvocationParser("quit").check_args(VerbInvocation.from_str("quit")) is None

    def test_args_given_but_not_expected(self):
        message = InvocationParser("quit").check_args(VerbInvocation.from_str("quit now"))
        assert message == "quit doesn't take arguments"

    def test_matching_args(self):
        parser = InvocationParser("mv {newname}")
        assert parser.check_args(VerbInvocation.from_str("mv x")) is None

    def test_missing_args_returns_usage(self):
        parser = InvocationParser("mv {newname}")
        assert parser.check_args(VerbInvocation.from_str("rename")) == "rename {newname}"
