"""Domain checks for profiles and daily inputs.

The engine itself tolerates out-of-range values (they fall through to the
lowest band). These checks let the tool layer reject such values first.
"""

from __future__ import annotations

import math

from pulsecheck.domains.health.domain_logic.metrics_models import (
    DailyInput,
    InvalidInputError,
    Profile,
)


def _require_finite(field: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(field, value, f"{field} must be a finite number")


def _require_positive(field: str, value: float) -> None:
    _require_finite(field, value)
    if value <= 0:
        raise InvalidInputError(field, value, f"{field} must be greater than 0")


def _require_non_negative(field: str, value: float) -> None:
    _require_finite(field, value)
    if value < 0:
        raise InvalidInputError(field, value, f"{field} must not be negative")


def _require_range(field: str, value: float, lo: float, hi: float) -> None:
    _require_finite(field, value)
    if not lo <= value <= hi:
        raise InvalidInputError(field, value, f"{field} must be between {lo:g} and {hi:g}")


def validate_profile(profile: Profile) -> Profile:
    """Return ``profile`` unchanged if every scored field is in domain."""
    _require_positive("age", profile.age)
    _require_positive("weight", profile.weight)
    _require_positive("height", profile.height)
    return profile


def validate_daily_input(daily_input: DailyInput) -> DailyInput:
    """Return ``daily_input`` unchanged if every field is in domain."""
    _require_range("mood", daily_input.mood, 1, 5)
    if daily_input.mood != int(daily_input.mood):
        raise InvalidInputError("mood", daily_input.mood, "mood must be a whole number")
    _require_non_negative("sleep", daily_input.sleep)
    _require_non_negative("activity", daily_input.activity)
    _require_non_negative("water", daily_input.water)
    _require_non_negative("screen_time", daily_input.screen_time)
    _require_range("posture_score", daily_input.posture_score, 0, 100)
    return daily_input
