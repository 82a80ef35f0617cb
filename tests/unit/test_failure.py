"""Tests for FailureDescription and UnwrapError."""

import pytest

from rop import FailureDescription, UnwrapError


class TestFailureDescription:
    def test_creation_with_message(self):
        desc = FailureDescription("name too short")
        assert desc.message == "name too short"
        assert desc.cause is None
        assert desc.timestamp is not None

    def test_creation_with_cause(self):
        ex = ValueError("bad")
        desc = FailureDescription("parse failed", ex)
        assert desc.cause is ex

    def test_factory_method(self):
        desc = FailureDescription.create("missing")
        assert desc.message == "missing"
        assert desc.cause is None

    def test_immutability(self):
        desc = FailureDescription("test")
        with pytest.raises(AttributeError):
            desc.message = "changed"  # type: ignore[misc]

    def test_timestamp_is_utc(self):
        assert FailureDescription("test").timestamp.tzinfo is not None

    def test_str_is_message(self):
        assert str(FailureDescription("invalid email format")) == "invalid email format"

    def test_equality_ignores_timestamp(self):
        assert FailureDescription("x") == FailureDescription("x")
        assert FailureDescription("x") != FailureDescription("y")


class TestFromException:
    def test_uses_exception_message(self):
        ex = ValueError("bad value")
        desc = FailureDescription.from_exception(ex)
        assert desc.message == "bad value"
        assert desc.cause is ex

    def test_prefix(self):
        desc = FailureDescription.from_exception(RuntimeError("boom"), "panic")
        assert desc.message == "panic: boom"

    def test_empty_message_falls_back_to_type_name(self):
        desc = FailureDescription.from_exception(TimeoutError())
        assert desc.message == "TimeoutError"


class TestFullStackTrace:
    def test_without_cause(self):
        assert FailureDescription("just a message").full_stack_trace() == "just a message"

    def test_with_cause(self):
        try:
            raise ValueError("boom")
        except ValueError as e:
            trace = FailureDescription("parse failed", e).full_stack_trace()
        assert "parse failed" in trace
        assert "ValueError" in trace
        assert "boom" in trace


class TestUnwrapError:
    def test_carries_failure(self):
        desc = FailureDescription("cannot continue")
        err = UnwrapError(desc)
        assert err.failure is desc
        assert str(err) == "cannot continue"

    def test_chains_cause(self):
        cause = OSError("disk full")
        err = UnwrapError(FailureDescription("write failed", cause))
        assert err.__cause__ is cause

    def test_no_cause(self):
        assert UnwrapError(FailureDescription("x")).__cause__ is None
