"""Input boundary: raw form/slider values -> typed Profile and DailyInput.

Raw values arrive as strings or numbers. Each one is coerced explicitly,
falling back to the default for that field, so the engine only ever sees
numbers. Parsing never raises.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from pulsecheck.domains.health.domain_logic.metrics_calculator import round_half_up
from pulsecheck.domains.health.domain_logic.metrics_models import (
    DEFAULT_DAILY_INPUT,
    DEFAULT_PROFILE,
    DailyInput,
    Gender,
    Profile,
)

logger = logging.getLogger(__name__)

# Accepted aliases for daily input keys (camelCase from UI widgets).
_DAILY_KEY_ALIASES = {
    "screenTime": "screen_time",
    "postureScore": "posture_score",
}


def _num(val: Any, default: float) -> float:
    """Convert to a finite float, returning default for None or non-numeric."""
    if val is None or isinstance(val, bool):
        return default
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return default
    try:
        result = float(val)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def _num_or_default(val: Any, default: float) -> float:
    """Like ``_num`` but an empty or zero measurement also means 'not given'."""
    result = _num(val, default)
    return result if result else default


def _int(val: Any, default: int) -> int:
    """Whole-number fields round half up, so 2.5 becomes 3."""
    return int(round_half_up(_num(val, default)))


def _gender(val: Any, default: Gender) -> Gender:
    if isinstance(val, Gender):
        return val
    try:
        return Gender(str(val).strip().lower())
    except ValueError:
        return default


def parse_profile(raw: Mapping[str, Any]) -> Profile:
    """Build a Profile from sign-up form values.

    Missing, unparsable and zero measurements take the default profile value.
    """
    d = DEFAULT_PROFILE
    name = str(raw.get("name") or "").strip() or d.name
    profile = Profile(
        name=name,
        age=int(_num_or_default(raw.get("age"), d.age)),
        gender=_gender(raw.get("gender"), d.gender),
        weight=_num_or_default(raw.get("weight"), d.weight),
        height=_num_or_default(raw.get("height"), d.height),
        waist=_num_or_default(raw.get("waist"), d.waist),
        hip=_num_or_default(raw.get("hip"), d.hip),
    )
    logger.debug("Parsed profile for %s", profile.name)
    return profile


def normalize_daily_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map widget key names onto DailyInput field names."""
    return {_DAILY_KEY_ALIASES.get(k, k): v for k, v in raw.items()}


def parse_daily_input(
    raw: Mapping[str, Any], base: DailyInput = DEFAULT_DAILY_INPUT
) -> DailyInput:
    """Build a DailyInput from slider/selector values.

    Fields absent from ``raw`` keep their value from ``base``; zero is a
    legitimate reading here. Unknown keys are ignored.
    """
    values = normalize_daily_keys(raw)
    return DailyInput(
        mood=_int(values.get("mood"), base.mood),
        sleep=_num(values.get("sleep"), base.sleep),
        activity=_num(values.get("activity"), base.activity),
        water=_int(values.get("water"), base.water),
        screen_time=_num(values.get("screen_time"), base.screen_time),
        posture_score=_int(values.get("posture_score"), base.posture_score),
    )
