"""
Steps — the plain functions the demo pipelines are built from.

Two kinds:
  - fallible steps return Result[T] and are chained with .pipe()/.bind()
  - total steps return a plain value and are chained with .map()

None of them log or print; narration is the caller's business.
"""

from __future__ import annotations

import re
import time
from datetime import UTC, datetime
from typing import Callable

from pydantic import ValidationError
from rop import Result

from rop_demo.config import AgePolicy
from rop_demo.models import EnrichedUser, FormattedUserProfile, User, UserInput

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
MIN_NAME_LENGTH = 2

DEFAULT_POLICY = AgePolicy()

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(UTC)


def timestamp_id() -> str:
    """User id derived from the wall clock in nanoseconds, e.g. user_1718000000000000000."""
    return f"user_{time.time_ns()}"


# ─────────────────────── Numeric walkthrough ───────────────────────


def step1(x: int) -> Result[str]:
    """Square a non-negative number and render it as "v=<square>"."""
    if x < 0:
        return Result.failure("negative!")
    return Result.success(f"v={x * x}")


def step2(s: str) -> Result[float]:
    """Measure a non-empty string."""
    if not s:
        return Result.failure("empty")
    return Result.success(float(len(s)))


# ─────────────────────── User registration ───────────────────────


def parse_user_json(raw: str | bytes) -> Result[UserInput]:
    """Parse a JSON document into a UserInput. Malformed JSON or bad types fail."""
    try:
        return Result.success(UserInput.model_validate_json(raw))
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        return Result.failure(f"invalid user JSON: {detail}", e)


def validate_user(user_input: UserInput, policy: AgePolicy = DEFAULT_POLICY) -> Result[UserInput]:
    """
    Check email format, name lengths and minimum age, in that order.

    The first violated rule determines the failure message.
    """
    if not EMAIL_PATTERN.match(user_input.email):
        return Result.failure("invalid email format")
    if len(user_input.first_name) < MIN_NAME_LENGTH or len(user_input.last_name) < MIN_NAME_LENGTH:
        return Result.failure("name too short")
    if user_input.age < policy.minimum_age:
        return Result.failure(f"users must be at least {policy.minimum_age} years old")
    return Result.success(user_input)


def create_user(user_input: UserInput, id_factory: IdFactory = timestamp_id) -> User:
    return User(
        id=id_factory(),
        email=user_input.email.lower(),
        first_name=user_input.first_name.lower().title(),
        last_name=user_input.last_name.lower().title(),
        age=user_input.age,
        verified=False,
    )


def determine_account_type(age: int, policy: AgePolicy = DEFAULT_POLICY) -> str:
    if age < policy.adult_age:
        return "Junior"
    if age < policy.senior_age:
        return "Standard"
    return "Senior"


def enrich_user(user: User, policy: AgePolicy = DEFAULT_POLICY, clock: Clock = utc_now) -> EnrichedUser:
    return EnrichedUser(
        user=user,
        full_name=f"{user.first_name} {user.last_name}",
        is_adult=user.age >= policy.adult_age,
        account_type=determine_account_type(user.age, policy),
        created_at=clock(),
    )


def format_join_date(moment: datetime) -> str:
    """Render a date as e.g. "Jan 2, 2006" (no zero padding on the day)."""
    return f"{moment:%b} {moment.day}, {moment:%Y}"


def format_user_profile(enriched: EnrichedUser) -> FormattedUserProfile:
    status = "Verified" if enriched.verified else "Pending Verification"
    return FormattedUserProfile(
        display_name=enriched.full_name,
        contact=enriched.email,
        status=f"{status} ({enriched.account_type} Account)",
        join_date=format_join_date(enriched.created_at),
    )
