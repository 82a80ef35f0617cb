"""
Demo entry point — walks through every combinator with narrated output.

Composition root: loads settings, configures structlog, and runs the
configured scenarios in order. Each scenario builds a small railway from the
steps in rop_demo.steps and logs what happened on each track.

Scenarios:
  bind      step1 then step2 via .bind()
  pipe      the same chain via .pipe()
  negative  step1 rejecting a negative input
  map       user registration with a valid and an invalid request
  tee       .tee() on both tracks
  tee_e     .tee_e() with a succeeding effect, a failing effect, and a failure
  or_else   recovery to success, recovery to another failure, and a no-op
  try       Result.attempt() with a value, a returned failure, and an exception
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog
from pydantic import BaseModel
from rop import FailureDescription, Result

from rop_demo.config import DemoSettings
from rop_demo.pipeline import register_user, square_and_measure
from rop_demo.steps import step1, step2

log = structlog.get_logger()

VALID_USER_JSON = '{"email":"john.doe@example.com","first_name":"John","last_name":"Doe","age":25}'
INVALID_USER_JSON = '{"email":"not-an-email","first_name":"J","last_name":"D","age":10}'


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for human-readable console output.

    An unknown level name falls back to INFO.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def pretty(value: Any) -> str:
    """Render a dataclass, pydantic model, or plain value as indented JSON."""
    if isinstance(value, BaseModel):
        value = value.model_dump()
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    return json.dumps(value, indent=2, default=str)


def _log_stage(stage: str, value: Any) -> None:
    log.info("registration.stage", stage=stage, payload=pretty(value))


def _log_slots(event: str, result: Result[Any]) -> None:
    value, error = result.unwrap()
    log.info(event, value=value, error=None if error is None else error.message)


# ─────────────────────── Scenarios ───────────────────────


def run_bind(settings: DemoSettings) -> Result[float]:
    res = Result.success(settings.bind_input)
    new_res = res.bind(step1)
    next_res = new_res.bind(step2)
    new_res.on_success(lambda val: log.info("bind.step1_success", value=val))
    next_res.on_error(lambda err: log.error("bind.step2_error", error=err.message))
    return next_res


def run_pipe(settings: DemoSettings) -> Result[float]:
    return (
        square_and_measure(settings.bind_input)
        .on_success(lambda val: log.info("pipe.final_result", value=val))
        .on_error(lambda err: log.error("pipe.error", error=err.message))
    )


def run_negative(settings: DemoSettings) -> Result[str]:
    return (
        Result.success(settings.negative_input)
        .pipe(step1)
        .on_error(lambda err: log.warning("negative.rejected", reason="Input is negative", error=err.message))
    )


def run_map(settings: DemoSettings) -> Result[Any]:
    valid = register_user(VALID_USER_JSON, policy=settings.age_policy, observe=_log_stage)
    valid.on_error(lambda err: log.error("registration.failed", request="valid", error=err.message))

    invalid = register_user(INVALID_USER_JSON, policy=settings.age_policy, observe=_log_stage)
    invalid.on_error(lambda err: log.error("registration.failed", request="invalid", error=err.message))
    return invalid


def run_tee(settings: DemoSettings) -> Result[int]:
    ok_res = Result.success(100)
    _log_slots("tee.before_ok", ok_res)
    tee_res1 = ok_res.tee(lambda val: log.info("tee.observed", value=val))
    _log_slots("tee.after_ok", tee_res1)

    fail_res = Result.failure("original error for Tee")
    _log_slots("tee.before_fail", fail_res)
    tee_res2 = fail_res.tee(lambda val: log.error("tee.unexpected_call", value=val))
    _log_slots("tee.after_fail", tee_res2)
    return tee_res2


def _effect_ok(val: int) -> None:
    log.info("tee_e.effect", value=val, outcome="will succeed")


def _effect_fail(val: int) -> Result[None]:
    log.info("tee_e.effect", value=val, outcome="will fail")
    return Result.failure("error from TeeE's function")


def run_tee_e(settings: DemoSettings) -> Result[int]:
    ok_res1 = Result.success(200)
    _log_slots("tee_e.before_ok_effect_ok", ok_res1)
    _log_slots("tee_e.after_ok_effect_ok", ok_res1.tee_e(_effect_ok))

    ok_res2 = Result.success(300)
    _log_slots("tee_e.before_ok_effect_fail", ok_res2)
    failed = ok_res2.tee_e(_effect_fail)
    _log_slots("tee_e.after_ok_effect_fail", failed)

    fail_res = Result.failure("original error for TeeE")
    _log_slots("tee_e.before_fail", fail_res)
    _log_slots("tee_e.after_fail", fail_res.tee_e(lambda val: log.error("tee_e.unexpected_call", value=val)))
    return failed


def _recover_with_default(err: FailureDescription) -> Result[str]:
    log.info("or_else.recovering", error=err.message, outcome="default value")
    return Result.success("default value")


def _recover_with_failure(err: FailureDescription) -> Result[str]:
    log.info("or_else.recovering", error=err.message, outcome="another failure")
    return Result.failure("error from OrElse's recovery function")


def run_or_else(settings: DemoSettings) -> Result[str]:
    fail_res1 = Result.failure("first error for OrElse")
    _log_slots("or_else.before_fail_recover_ok", fail_res1)
    recovered = fail_res1.or_else(_recover_with_default)
    _log_slots("or_else.after_fail_recover_ok", recovered)

    fail_res2 = Result.failure("second error for OrElse")
    _log_slots("or_else.before_fail_recover_fail", fail_res2)
    _log_slots("or_else.after_fail_recover_fail", fail_res2.or_else(_recover_with_failure))

    ok_res = Result.success("original ok value")
    _log_slots("or_else.before_ok", ok_res)
    _log_slots("or_else.after_ok", ok_res.or_else(_recover_with_default))
    return recovered


def _explode() -> int:
    log.info("try.executing", outcome="will raise")
    raise RuntimeError("oh no, a panic occurred!")


def run_try(settings: DemoSettings) -> Result[int]:
    _log_slots("try.returns_value", Result.attempt(lambda: 42))
    _log_slots(
        "try.returns_failure",
        Result.attempt(lambda: Result.failure("error from function wrapped by Try")),
    )
    contained = Result.attempt(_explode)
    _log_slots("try.raises", contained)
    return contained


SCENARIO_RUNNERS: dict[str, Callable[[DemoSettings], Result[Any]]] = {
    "bind": run_bind,
    "pipe": run_pipe,
    "negative": run_negative,
    "map": run_map,
    "tee": run_tee,
    "tee_e": run_tee_e,
    "or_else": run_or_else,
    "try": run_try,
}


def run_scenarios(settings: DemoSettings) -> dict[str, Result[Any]]:
    """Run the configured scenarios in order and return each one's final Result."""
    outcomes: dict[str, Result[Any]] = {}
    for name in settings.scenarios:
        log.info("scenario.starting", scenario=name)
        outcomes[name] = SCENARIO_RUNNERS[name](settings)
    return outcomes


def main() -> int:
    """Load settings, configure logging, and run the demo scenarios."""
    try:
        settings = DemoSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log.info(
        "demo.starting",
        log_level=settings.log_level,
        scenarios=settings.scenarios,
        minimum_age=settings.age_policy.minimum_age,
    )

    outcomes = run_scenarios(settings)

    log.info(
        "demo.finished",
        succeeded=[name for name, result in outcomes.items() if result.is_success()],
        failed=[name for name, result in outcomes.items() if result.is_failure()],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
