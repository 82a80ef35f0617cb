"""
Result — the core of Railway-Oriented Programming.

A Result[T] is either Success(value: T) or Failure(error: FailureDescription).
Steps are chained with .bind()/.pipe(); the first failure switches the chain
onto the failure track and every later step is skipped.

    ┌───────────┐     pipe      ┌───────────┐      map      ┌──────────┐
    │   parse   │──Success──────│ validate  │──Success──────│  create  │──→ Result[T]
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result[T]

Combinators:
  - bind / pipe  T -> Result[U]           chain a step that may fail
  - map          T -> U                   chain a step that cannot fail
  - tee          T -> Any                 side effect, never changes the Result
  - tee_e        T -> Result | None       side effect that may fail
  - or_else      error -> Result[T]       the only recovery path
  - on_success / on_error                 observers, return the same Result
  - attempt      () -> T | Result[T]      the only place exceptions are contained
  - unwrap / must                         leave the railway

Nothing in this module catches exceptions except Result.attempt(). An exception
raised by a function handed to any other combinator propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from rop.failure import FailureDescription, UnwrapError

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("rop.result")


class Result(Generic[T]):
    """
    Railway-Oriented Programming Result.

    Two possible states, each its own subclass:
      - Success(value: T)  — the happy path
      - Failure(error: FailureDescription) — the error track

    Usage:
        >>> Result.success(5).map(lambda x: x * 2).value()
        10

        >>> Result.failure("bad input").map(lambda x: x * 2).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def value(self) -> T:
        """
        Extract the success value. Raises ValueError if called on a Failure.

        Prefer .unwrap() or match/case when the state is not known.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err.message}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> FailureDescription:
        """Extract the failure description. Raises ValueError if called on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Chaining ────────────────────────

    def bind(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning step. Short-circuits on failure.

        This is the key operator — it connects railway segments. On a
        Failure the original error is carried forward untouched and `fn`
        is never called.

            def step1(x: int) -> Result[str]:
                if x < 0:
                    return Result.failure("negative!")
                return Result.success(f"v={x * x}")

            Result.success(3).bind(step1)    # → Success('v=9')
            Result.success(-10).bind(step1)  # → Failure('negative!')
        """
        match self:
            case Success(v):
                return _expect_result(fn(v), "bind", fn)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def pipe(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        """Alias of .bind(), for left-to-right pipelines."""
        return self.bind(fn)

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """
        Transform the success value with a function that cannot fail.

        `fn` has no error channel: returning a Result from it is a misuse
        and raises TypeError (use .bind() for steps that may fail).

            Result.success(5).map(lambda x: x * 2)   # → Success(10)
            Result.failure("x").map(lambda x: x * 2)  # → same Failure
        """
        match self:
            case Success(v):
                mapped = fn(v)
                if isinstance(mapped, Result):
                    raise TypeError(
                        f"map() function {_describe(fn)} returned a Result; use bind() for steps that may fail"
                    )
                return Success(mapped)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Side Effects ────────────────────────

    def tee(self, action: Callable[[T], Any]) -> Result[T]:
        """
        Run a side effect on the success value and return this Result unchanged.

            result.tee(lambda user: log.info("user.created", id=user.id))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def tee_e(self, action: Callable[[T], Optional[Result[Any]]]) -> Result[T]:
        """
        Run a side effect that may fail.

        `action` returns None or a Success when the effect worked — this Result
        is then returned unchanged. If it returns a Failure, that failure
        replaces this Result and the success value is dropped.

            result.tee_e(lambda order: audit_log.write(order))
        """
        match self:
            case Success(v):
                outcome = action(v)
                if outcome is None:
                    return self
                match _expect_result(outcome, "tee_e", action):
                    case Failure(err):
                        return Failure(err)
        return self

    def on_success(self, action: Callable[[T], Any]) -> Result[T]:
        """Observe the value when this is a Success. Returns this Result unchanged."""
        match self:
            case Success(v):
                action(v)
        return self

    def on_error(self, action: Callable[[FailureDescription], Any]) -> Result[T]:
        """Observe the error when this is a Failure. Returns this Result unchanged."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def or_else(self, recover: Callable[[FailureDescription], Result[T]]) -> Result[T]:
        """
        Recover from a failure. The only way back onto the success track.

        `recover` receives the error and returns a new Result, which may be a
        Success (recovered) or a different Failure.

            Result.failure("not cached").or_else(lambda err: fetch_from_origin())
        """
        match self:
            case Failure(err):
                return _expect_result(recover(err), "or_else", recover)
        return self

    # ──────────────────────── Leaving the railway ────────────────────────

    def unwrap(self) -> tuple[Optional[T], Optional[FailureDescription]]:
        """
        Return both slots as (value, error).

        Exactly one side is meaningful: (value, None) on success, (None, error)
        on failure. A None value next to a None error is a Success(None).
        """
        match self:
            case Success(v):
                return v, None
            case Failure(err):
                return None, err
        raise TypeError("unreachable")  # pragma: no cover

    def must(self) -> T:
        """
        Return the success value or raise UnwrapError.

        UNSAFE: only for call sites that have already established the chain
        cannot fail. It is not an error-handling path.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise UnwrapError(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure_from(error: FailureDescription) -> Result[T]:
        """Create a failed Result from a FailureDescription."""
        return Failure(error)

    @staticmethod
    def failure(message: str, cause: Optional[BaseException] = None) -> Result[T]:
        """
        Create a failed Result with a message and optional cause.

            Result.failure("users must be at least 13 years old")
            Result.failure("invalid user JSON", err)
        """
        return Failure(FailureDescription(message=message, cause=cause))

    @staticmethod
    def attempt(computation: Callable[[], T | Result[T]]) -> Result[T]:
        """
        Run a computation, containing any exception it raises.

          - a plain return value becomes Success(value)
          - a returned Result is passed through as-is
          - a raised Exception becomes Failure("panic: <message>") with the
            exception as cause

        KeyboardInterrupt and SystemExit are not contained.

            Result.attempt(lambda: int(raw))
        """
        try:
            outcome = computation()
        except Exception as e:
            logger.warning("Contained fault from %s: %r", _describe(computation), e)
            return Failure(FailureDescription.from_exception(e, "panic"))
        if isinstance(outcome, Result):
            return outcome
        return Success(outcome)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track — wraps a value of type T (None included)."""

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        if isinstance(other, Failure):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


# Enable structural pattern matching: case Success(value)
Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """The failure track — wraps a FailureDescription. Holds no value slot."""

    _error: FailureDescription

    def __init__(self, error: FailureDescription) -> None:
        if not isinstance(error, FailureDescription):
            raise TypeError(f"Failure error must be a FailureDescription, got {type(error).__name__}")
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error.message!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return (
                self._error.message == other._error.message
                and self._error.cause is other._error.cause
            )
        if isinstance(other, Success):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error.message))


# Enable structural pattern matching: case Failure(error)
Failure.__match_args__ = ("_error",)


def _expect_result(outcome: object, combinator: str, fn: Callable[..., Any]) -> Result[Any]:
    if not isinstance(outcome, Result):
        raise TypeError(
            f"{combinator}() function {_describe(fn)} must return a Result, got {type(outcome).__name__}"
        )
    return outcome


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
