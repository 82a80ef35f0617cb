"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages, so tests
read as statements about the railway rather than about isinstance checks.

Usage in tests:
    from rop import ResultAssertions

    def test_register_user():
        result = register_user(valid_json)
        profile = ResultAssertions.assert_success(result)
        assert profile.display_name == "John Doe"

    def test_under_age():
        result = register_user(child_json)
        ResultAssertions.assert_failure_message_contains(result, "at least 13")
"""

from __future__ import annotations

from typing import Any, TypeVar

from rop.failure import FailureDescription
from rop.result import Result

T = TypeVar("T")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error().message!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(result: Result[T], message: str = "") -> FailureDescription:
        """
        Assert the Result is a Failure and return its description.

            error = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        return result.error()

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Assert that the failure message contains the given substring (case-insensitive)."""
        error = ResultAssertions.assert_failure(result)
        assert substring.lower() in error.message.lower(), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {error.message!r}"
        )

    @staticmethod
    def assert_failure_message_equals(result: Result[T], expected_message: str) -> None:
        """Assert that the failure message exactly equals the expected message."""
        error = ResultAssertions.assert_failure(result)
        assert error.message == expected_message, (
            f"Expected failure message {expected_message!r} "
            f"but got {error.message!r}"
        )

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )
