"""
Domain models — the user record at each stage of registration.

  UserInput ──validate──→ UserInput ──create──→ User ──enrich──→ EnrichedUser
                                                      ──format──→ FormattedUserProfile

UserInput is a pydantic model because it is parsed straight from JSON at the
edge. Everything after parsing is a frozen dataclass (immutable value object).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserInput(BaseModel):
    """
    Raw registration request.

    Accepts both camelCase and snake_case keys for the names. Missing fields
    fall back to empty values so that validation, not parsing, rejects them.
    """

    model_config = ConfigDict(frozen=True)

    email: str = ""
    first_name: str = Field(default="", validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str = Field(default="", validation_alias=AliasChoices("lastName", "last_name"))
    age: int = 0


@dataclass(frozen=True, slots=True)
class User:
    """A registered user, normalized from a validated UserInput."""

    id: str
    email: str
    first_name: str
    last_name: str
    age: int
    verified: bool = False


@dataclass(frozen=True, slots=True)
class EnrichedUser:
    """A User plus the derived attributes shown on the profile."""

    user: User
    full_name: str
    is_adult: bool
    account_type: str
    created_at: datetime

    @property
    def verified(self) -> bool:
        return self.user.verified

    @property
    def email(self) -> str:
        return self.user.email


@dataclass(frozen=True, slots=True)
class FormattedUserProfile:
    """Display-ready profile."""

    display_name: str
    contact: str
    status: str
    join_date: str
