"""Deterministic health metrics: composite score, BMI and risk bands.

The composite score sums six factor contributions. Each factor walks its
bands top-down and takes the first one that matches. The cardiovascular
and hypertension risks instead add one delta per dimension to a running
subtotal, then add a fixed baseline and cap at 95.

All formulas are deterministic: no I/O, no randomness, no logging.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from pulsecheck.domains.health.domain_logic.metrics_models import (
    DailyInput,
    HealthMetrics,
    HealthStatus,
    InvalidInputError,
    Profile,
    RiskLabels,
    RiskLevel,
    RiskMetrics,
)

SCORE_MIN = 0
SCORE_MAX = 100
RISK_CAP = 95

CARDIO_BASELINE = 10
HYPERTENSION_BASELINE = 5

# Health-status tiers, checked top-down against the final score.
STATUS_THRESHOLDS: list[tuple[int, HealthStatus]] = [
    (80, HealthStatus.EXCELLENT),
    (60, HealthStatus.GOOD),
    (40, HealthStatus.FAIR),
    (20, HealthStatus.POOR),
]

# (upper bound exclusive, label, risk %); anything above the last bound is Very High.
OBESITY_BANDS: list[tuple[float, RiskLevel, int]] = [
    (18.5, RiskLevel.UNDERWEIGHT, 30),
    (25.0, RiskLevel.LOW, 10),
    (30.0, RiskLevel.MODERATE, 55),
    (35.0, RiskLevel.HIGH, 75),
]
OBESITY_TOP_BAND: tuple[RiskLevel, int] = (RiskLevel.VERY_HIGH, 90)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float, places: int = 0) -> Decimal:
    """Round the exact binary value of ``value`` half away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------------
# Composite score factors (first-match bands)
# ---------------------------------------------------------------------------

def sleep_points(hours: float) -> int:
    """Sleep contributes up to 25 points; 7-9h is the optimal band."""
    if 7 <= hours <= 9:
        return 25
    if 6 <= hours <= 10:
        return 20
    if hours >= 4:
        return 10
    return 0


def water_points(glasses: float) -> int:
    if glasses >= 8:
        return 15
    if glasses >= 6:
        return 12
    if glasses >= 4:
        return 6
    if glasses >= 2:
        return 3
    return 0


def activity_points(minutes: float) -> int:
    if minutes >= 60:
        return 20
    if minutes >= 45:
        return 17
    if minutes >= 30:
        return 15
    if minutes >= 15:
        return 8
    if minutes >= 5:
        return 4
    return 0


def screen_time_points(hours: float) -> int:
    """Inverse factor: less screen time earns more points (max 10)."""
    if hours <= 2:
        return 10
    if hours <= 4:
        return 8
    if hours <= 6:
        return 5
    if hours <= 10:
        return 2
    return 0


def mood_points(mood: int) -> int:
    """Inverse factor on the 1 (best) to 5 (worst) scale.

    Any value other than 1-4 lands in the worst band.
    """
    if mood == 1:
        return 15
    if mood == 2:
        return 12
    if mood == 3:
        return 9
    if mood == 4:
        return 5
    return 2


def posture_points(posture_score: float) -> int:
    if posture_score >= 85:
        return 15
    if posture_score >= 70:
        return 12
    if posture_score >= 60:
        return 8
    if posture_score >= 50:
        return 5
    return 2


def score_breakdown(daily_input: DailyInput) -> dict[str, int]:
    """Per-factor contributions to the composite score."""
    return {
        "sleep": sleep_points(daily_input.sleep),
        "water": water_points(daily_input.water),
        "activity": activity_points(daily_input.activity),
        "screen_time": screen_time_points(daily_input.screen_time),
        "mood": mood_points(daily_input.mood),
        "posture": posture_points(daily_input.posture_score),
    }


def compute_score(daily_input: DailyInput) -> int:
    """Composite wellness score, clamped into [0, 100]."""
    total = sum(score_breakdown(daily_input).values())
    return int(_clamp(round_half_up(total), SCORE_MIN, SCORE_MAX))


def classify_health_status(score: int) -> HealthStatus:
    for threshold, status in STATUS_THRESHOLDS:
        if score >= threshold:
            return status
    return HealthStatus.CRITICAL


# ---------------------------------------------------------------------------
# BMI and risks
# ---------------------------------------------------------------------------

def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """BMI rounded to one decimal place.

    Every threshold comparison downstream uses this rounded value.

    Raises:
        InvalidInputError: if ``height_cm`` is not positive, or so extreme
            that the ratio underflows or is not finite.
    """
    if height_cm <= 0:
        raise InvalidInputError("height", height_cm, "height must be greater than 0 cm")
    height_m = height_cm / 100
    height_sq = height_m * height_m
    if height_sq == 0:
        raise InvalidInputError("height", height_cm, "height is too small to compute BMI")
    bmi = weight_kg / height_sq
    if not math.isfinite(bmi):
        raise InvalidInputError("height", height_cm, "weight and height give a non-finite BMI")
    return float(round_half_up(bmi, 1))


def classify_obesity(bmi: float) -> tuple[RiskLevel, int]:
    """Return (label, risk %) for a rounded BMI."""
    for upper, label, risk in OBESITY_BANDS:
        if bmi < upper:
            return label, risk
    return OBESITY_TOP_BAND


def classify_risk(risk: int) -> RiskLevel:
    """Three-band label for the cardiovascular and hypertension risks."""
    if risk < 30:
        return RiskLevel.LOW
    if risk < 60:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def compute_cardiovascular_risk(daily_input: DailyInput, bmi: float) -> int:
    subtotal = 0

    # Activity (minutes)
    if daily_input.activity < 15:
        subtotal += 30
    elif daily_input.activity < 30:
        subtotal += 20
    elif daily_input.activity < 45:
        subtotal += 10

    # BMI
    if bmi >= 30:
        subtotal += 30
    elif bmi >= 25:
        subtotal += 15

    # Hydration (glasses)
    if daily_input.water < 4:
        subtotal += 15
    elif daily_input.water < 6:
        subtotal += 8

    return min(RISK_CAP, subtotal + CARDIO_BASELINE)


def compute_hypertension_risk(daily_input: DailyInput) -> int:
    subtotal = 0

    # Mood (stress proxy)
    if daily_input.mood >= 4:
        subtotal += 25
    elif daily_input.mood >= 3:
        subtotal += 12

    # Screen time (hours)
    if daily_input.screen_time > 8:
        subtotal += 20
    elif daily_input.screen_time > 6:
        subtotal += 15
    elif daily_input.screen_time > 4:
        subtotal += 8

    # Sleep (hours)
    if daily_input.sleep < 5:
        subtotal += 20
    elif daily_input.sleep < 7:
        subtotal += 10

    if daily_input.activity < 20:
        subtotal += 15

    return min(RISK_CAP, subtotal + HYPERTENSION_BASELINE)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

def compute_metrics(profile: Profile, daily_input: DailyInput) -> HealthMetrics:
    """Compute the full set of health metrics for one check-in.

    This is the main entry point of the engine. It is pure: identical
    inputs always yield equal results.

    Raises:
        InvalidInputError: if the profile height is not positive.
    """
    score = compute_score(daily_input)
    bmi = compute_bmi(profile.weight, profile.height)

    obesity_label, obesity_risk = classify_obesity(bmi)
    cardiovascular_risk = compute_cardiovascular_risk(daily_input, bmi)
    hypertension_risk = compute_hypertension_risk(daily_input)

    return HealthMetrics(
        score=score,
        bmi=bmi,
        health_status=classify_health_status(score),
        risk_metrics=RiskMetrics(
            obesity_risk=obesity_risk,
            cardiovascular_risk=cardiovascular_risk,
            hypertension_risk=hypertension_risk,
        ),
        risk_labels=RiskLabels(
            obesity_label=obesity_label,
            cardio_label=classify_risk(cardiovascular_risk),
            hyper_label=classify_risk(hypertension_risk),
        ),
    )
