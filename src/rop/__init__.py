"""
rop — Railway-Oriented Programming for Python.

A Result is either a Success carrying a value or a Failure carrying a
FailureDescription. Steps are chained with combinators; the first failure
skips the rest of the chain.

    from rop import Result

    def step1(x: int) -> Result[str]:
        if x < 0:
            return Result.failure("negative!")
        return Result.success(f"v={x * x}")

    result = (
        Result.success(42)
        .pipe(step1)
        .map(len)
        .on_error(lambda err: print(f"Error: {err}"))
    )
"""

from rop.assertions import ResultAssertions
from rop.failure import FailureDescription, UnwrapError
from rop.result import Failure, Result, Success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "FailureDescription",
    "UnwrapError",
    "ResultAssertions",
]

__version__ = "1.0.0"
