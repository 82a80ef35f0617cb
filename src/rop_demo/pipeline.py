"""
Pipelines — the demo steps wired into railways.

User registration:

  parse_user_json(raw)
    → validate_user(input)          (may fail)
      → create_user(input)          (cannot fail)
        → enrich_user(user)         (cannot fail)
          → format_user_profile()   (cannot fail)

Each stage reports its intermediate value to an optional observer through
.tee(), so narration never touches the values flowing down the railway.
Failures short-circuit: once validation fails no later stage runs and the
observer is not called again.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from rop import Result

from rop_demo.config import AgePolicy
from rop_demo.models import FormattedUserProfile
from rop_demo.steps import (
    DEFAULT_POLICY,
    Clock,
    IdFactory,
    create_user,
    enrich_user,
    format_user_profile,
    parse_user_json,
    step1,
    step2,
    timestamp_id,
    utc_now,
    validate_user,
)

StageObserver = Callable[[str, Any], None]

PARSED_INPUT = "PARSED INPUT"
VALIDATED_INPUT = "VALIDATED INPUT"
CREATED_USER = "CREATED USER"
ENRICHED_USER = "ENRICHED USER"
FINAL_PROFILE = "FINAL PROFILE"


def _ignore(stage: str, value: Any) -> None:
    return None


def register_user(
    raw: str | bytes,
    policy: AgePolicy = DEFAULT_POLICY,
    clock: Clock = utc_now,
    id_factory: IdFactory = timestamp_id,
    observe: StageObserver = _ignore,
) -> Result[FormattedUserProfile]:
    """
    Turn a JSON registration request into a display-ready profile.

    Returns the profile on success, or the failure from the first stage
    that rejected the input (parse or validation).
    """
    return (
        Result.success(raw)
        .pipe(parse_user_json)
        .tee(partial(observe, PARSED_INPUT))
        .pipe(partial(validate_user, policy=policy))
        .tee(partial(observe, VALIDATED_INPUT))
        .map(partial(create_user, id_factory=id_factory))
        .tee(partial(observe, CREATED_USER))
        .map(partial(enrich_user, policy=policy, clock=clock))
        .tee(partial(observe, ENRICHED_USER))
        .map(format_user_profile)
        .tee(partial(observe, FINAL_PROFILE))
    )


def square_and_measure(x: int) -> Result[float]:
    """step1 then step2: the length of "v=<x*x>", or the first failure."""
    return Result.success(x).pipe(step1).pipe(step2)
