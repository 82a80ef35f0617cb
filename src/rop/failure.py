"""
Failure description — the opaque payload carried on the failure track.

A failure is a human-readable message plus an optional chained cause
(the exception that produced it, if any). There is deliberately no error
code or class hierarchy: callers that need to branch on a failure do so
through the message or the cause.

UnwrapError is the single exception type the algebra raises on purpose,
from Result.must(), when a caller asserts success and is wrong.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Optional


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor carrying a message, optional cause, and timestamp.

    >>> desc = FailureDescription("name too short")
    >>> desc.message
    'name too short'
    >>> desc.cause is None
    True
    """

    message: str
    cause: Optional[BaseException] = field(default=None, repr=False, compare=False)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC), repr=False, compare=False
    )

    @staticmethod
    def create(message: str, cause: Optional[BaseException] = None) -> FailureDescription:
        """Factory method — positional-friendly alternative to the constructor."""
        return FailureDescription(message=message, cause=cause)

    @staticmethod
    def from_exception(exception: BaseException, prefix: str | None = None) -> FailureDescription:
        """
        Describe an exception, keeping it as the cause.

            FailureDescription.from_exception(err, "invalid user JSON")
            # message: "invalid user JSON: <str(err)>"
        """
        detail = str(exception) or type(exception).__name__
        message = f"{prefix}: {detail}" if prefix else detail
        return FailureDescription(message=message, cause=exception)

    def full_stack_trace(self) -> str:
        """Full stack trace string including the message and the cause chain."""
        if self.cause is None:
            return self.message
        tb = "".join(traceback.format_exception(type(self.cause), self.cause, self.cause.__traceback__))
        return f"{self.message}\n{tb}"

    def __str__(self) -> str:
        return self.message


class UnwrapError(RuntimeError):
    """
    Raised by Result.must() when called on a Failure.

    Carries the FailureDescription in `.failure`; the original cause, when
    present, is chained as `__cause__`.
    """

    def __init__(self, failure: FailureDescription) -> None:
        super().__init__(failure.message)
        self.failure = failure
        self.__cause__ = failure.cause
