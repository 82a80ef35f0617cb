"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with ROP_DEMO_
  - Fall back to a .env file at the project root
  - Validate types and constraints at startup

Nested settings use env_nested_delimiter="__", so ROP_DEMO_AGE_POLICY__MINIMUM_AGE
maps to age_policy.minimum_age.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file).
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

SCENARIOS: tuple[str, ...] = ("bind", "pipe", "negative", "map", "tee", "tee_e", "or_else", "try")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AgePolicy(BaseModel):
    """
    Age thresholds used when validating and enriching users.

      minimum_age — users younger than this are rejected
      adult_age   — from this age on a user is an adult (Standard account)
      senior_age  — from this age on a user gets a Senior account
    """

    minimum_age: int = Field(default=13, ge=0, description="Minimum age to register")
    adult_age: int = Field(default=18, ge=0, description="Age at which a user is an adult")
    senior_age: int = Field(default=65, ge=0, description="Age at which a user is a senior")

    @model_validator(mode="after")
    def check_ordering(self) -> AgePolicy:
        """Reject policies whose thresholds are out of order."""
        if not self.minimum_age <= self.adult_age < self.senior_age:
            raise ValueError(
                "Age thresholds must satisfy minimum_age <= adult_age < senior_age, "
                f"got {self.minimum_age}, {self.adult_age}, {self.senior_age}"
            )
        return self


class DemoSettings(BaseSettings):
    """
    Root settings for the demo runner.

    Load order (highest priority first):
      1. Environment variables (ROP_DEMO_*)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ROP_DEMO_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    age_policy: AgePolicy = Field(default_factory=AgePolicy)
    bind_input: int = Field(default=42, description="Input for the bind and pipe walkthroughs")
    negative_input: int = Field(default=-10, description="Input for the negative walkthrough")
    scenarios: list[str] = Field(default_factory=lambda: list(SCENARIOS))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    @field_validator("scenarios")
    @classmethod
    def validate_scenarios(cls, value: list[str]) -> list[str]:
        """Reject scenario names the runner does not know."""
        unknown = [name for name in value if name not in SCENARIOS]
        if unknown:
            raise ValueError(
                f"Unknown scenarios: {', '.join(unknown)} (known: {', '.join(SCENARIOS)})"
            )
        return value

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)
