"""Unit tests for the health metrics calculator.

Covers the six score factors, status tiers, BMI rounding, the three risk
computations, and the compute_metrics orchestrator.
"""

from __future__ import annotations

import itertools

import pytest

from pulsecheck.domains.health.domain_logic.input_validation import validate_profile
from pulsecheck.domains.health.domain_logic.metrics_calculator import (
    RISK_CAP,
    activity_points,
    classify_health_status,
    classify_obesity,
    classify_risk,
    compute_bmi,
    compute_cardiovascular_risk,
    compute_hypertension_risk,
    compute_metrics,
    compute_score,
    mood_points,
    posture_points,
    score_breakdown,
    screen_time_points,
    sleep_points,
    water_points,
)
from pulsecheck.domains.health.domain_logic.metrics_models import (
    DailyInput,
    HealthStatus,
    InvalidInputError,
    Profile,
    RiskLevel,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _input(mood=3, sleep=8, activity=60, water=8, screen_time=2, posture_score=85):
    return DailyInput(
        mood=mood,
        sleep=sleep,
        activity=activity,
        water=water,
        screen_time=screen_time,
        posture_score=posture_score,
    )


def _profile(weight=60, height=165):
    return Profile(weight=weight, height=height)


# ===========================================================================
# Test: Score factors
# ===========================================================================

class TestSleepPoints:
    @pytest.mark.parametrize("hours,expected", [
        (7.0, 25), (8, 25), (9.0, 25),
        (6.99, 20), (6, 20), (9.5, 20), (10, 20),
        (10.01, 10), (5, 10), (4, 10), (12, 10),
        (3.99, 0), (0, 0),
    ])
    def test_bands(self, hours, expected):
        assert sleep_points(hours) == expected

    def test_lower_edge_of_optimal_band_is_inclusive(self):
        assert sleep_points(7.0) == 25
        assert sleep_points(6.99) == 20


class TestWaterPoints:
    @pytest.mark.parametrize("glasses,expected", [
        (16, 15), (8, 15), (7, 12), (6, 12), (5, 6), (4, 6), (3, 3), (2, 3), (1, 0), (0, 0),
    ])
    def test_bands(self, glasses, expected):
        assert water_points(glasses) == expected


class TestActivityPoints:
    @pytest.mark.parametrize("minutes,expected", [
        (120, 20), (60, 20), (59, 17), (45, 17), (44, 15), (30, 15),
        (29, 8), (15, 8), (14, 4), (5, 4), (4.9, 0), (0, 0),
    ])
    def test_bands(self, minutes, expected):
        assert activity_points(minutes) == expected


class TestScreenTimePoints:
    @pytest.mark.parametrize("hours,expected", [
        (0, 10), (2, 10), (2.5, 8), (4, 8), (5, 5), (6, 5), (6.5, 2), (10, 2), (10.5, 0), (16, 0),
    ])
    def test_bands(self, hours, expected):
        assert screen_time_points(hours) == expected


class TestMoodPoints:
    @pytest.mark.parametrize("mood,expected", [(1, 15), (2, 12), (3, 9), (4, 5), (5, 2)])
    def test_bands(self, mood, expected):
        assert mood_points(mood) == expected

    def test_out_of_range_mood_falls_to_worst_band(self):
        assert mood_points(0) == 2
        assert mood_points(7) == 2


class TestPosturePoints:
    @pytest.mark.parametrize("posture,expected", [
        (100, 15), (85, 15), (84, 12), (70, 12), (69, 8), (60, 8), (59, 5), (50, 5), (49, 2), (0, 2),
    ])
    def test_bands(self, posture, expected):
        assert posture_points(posture) == expected


# ===========================================================================
# Test: Composite score and status
# ===========================================================================

class TestCompositeScore:
    def test_perfect_day_reaches_100(self):
        assert compute_score(_input(mood=1)) == 100

    def test_breakdown_sums_to_score(self):
        daily = _input(mood=2, sleep=6.5, activity=20, water=5, screen_time=5, posture_score=72)
        assert sum(score_breakdown(daily).values()) == compute_score(daily)

    def test_score_always_in_bounds(self):
        grid = itertools.product(
            [1, 3, 5],            # mood
            [0, 4.5, 8, 11],      # sleep
            [0, 20, 90],          # activity
            [0, 5, 10],           # water
            [0, 5, 12],           # screen_time
            [0, 65, 95],          # posture
        )
        for mood, sleep, activity, water, screen, posture in grid:
            score = compute_score(_input(mood, sleep, activity, water, screen, posture))
            assert 0 <= score <= 100, f"Out of bounds: {score}"


class TestHealthStatus:
    @pytest.mark.parametrize("score,expected", [
        (100, HealthStatus.EXCELLENT),
        (80, HealthStatus.EXCELLENT),
        (79, HealthStatus.GOOD),
        (60, HealthStatus.GOOD),
        (59, HealthStatus.FAIR),
        (40, HealthStatus.FAIR),
        (39, HealthStatus.POOR),
        (20, HealthStatus.POOR),
        (19, HealthStatus.CRITICAL),
        (0, HealthStatus.CRITICAL),
    ])
    def test_tiers(self, score, expected):
        assert classify_health_status(score) is expected

    def test_status_carries_label_color_emoji(self):
        assert HealthStatus.EXCELLENT.label == "Excellent Health"
        assert HealthStatus.EXCELLENT.color == "#27ae60"
        assert HealthStatus.CRITICAL.label == "Critical - Immediate Action Needed"
        assert HealthStatus.CRITICAL.emoji == "🚨"
        assert HealthStatus.FAIR.label == "Fair Health - Needs Improvement"
        assert HealthStatus.POOR.label == "Poor Health - Action Required"


# ===========================================================================
# Test: BMI and obesity
# ===========================================================================

class TestBmi:
    def test_reference_profile(self):
        assert compute_bmi(60, 165) == 22.0

    def test_rounded_to_one_decimal(self):
        bmi = compute_bmi(70, 175)  # 22.857...
        assert bmi == 22.9

    def test_zero_height_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            compute_bmi(60, 0)
        assert exc_info.value.field == "height"

    def test_negative_height_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_bmi(60, -170)

    def test_vanishing_height_rejected(self):
        # positive, but squaring underflows to 0.0
        with pytest.raises(InvalidInputError) as exc_info:
            compute_bmi(60, 1e-200)
        assert exc_info.value.field == "height"

    def test_non_finite_bmi_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            compute_bmi(1e300, 1e-10)
        assert exc_info.value.field == "height"

    def test_huge_height_does_not_overflow(self):
        assert compute_bmi(60, 1e200) == 0.0

    def test_validated_profile_with_tiny_height_still_rejected(self):
        profile = validate_profile(Profile(weight=60, height=1e-200))
        with pytest.raises(InvalidInputError):
            compute_metrics(profile, DailyInput())

    def test_threshold_compared_after_rounding(self):
        # 24.96 rounds to 25.0, which is already Moderate
        weight = 24.96 * (1.7 ** 2)
        bmi = compute_bmi(weight, 170)
        assert bmi == 25.0
        assert classify_obesity(bmi) == (RiskLevel.MODERATE, 55)

    def test_just_below_threshold_after_rounding(self):
        # 18.449 rounds to 18.4 -> Underweight; 18.46 rounds to 18.5 -> Low
        assert classify_obesity(compute_bmi(18.449 * 2.89, 170))[0] is RiskLevel.UNDERWEIGHT
        assert classify_obesity(compute_bmi(18.46 * 2.89, 170))[0] is RiskLevel.LOW


class TestObesityBands:
    @pytest.mark.parametrize("bmi,label,risk", [
        (17.0, RiskLevel.UNDERWEIGHT, 30),
        (18.4, RiskLevel.UNDERWEIGHT, 30),
        (18.5, RiskLevel.LOW, 10),
        (24.9, RiskLevel.LOW, 10),
        (25.0, RiskLevel.MODERATE, 55),
        (29.9, RiskLevel.MODERATE, 55),
        (30.0, RiskLevel.HIGH, 75),
        (34.9, RiskLevel.HIGH, 75),
        (35.0, RiskLevel.VERY_HIGH, 90),
        (48.0, RiskLevel.VERY_HIGH, 90),
    ])
    def test_bands(self, bmi, label, risk):
        assert classify_obesity(bmi) == (label, risk)


# ===========================================================================
# Test: Cardiovascular and hypertension risk
# ===========================================================================

class TestCardiovascularRisk:
    def test_healthy_day_is_baseline(self):
        assert compute_cardiovascular_risk(_input(), 22.0) == 10

    def test_contributions_are_additive(self):
        # activity<15 (+30), bmi>=30 (+30), water<4 (+15), baseline +10
        daily = _input(activity=10, water=2)
        assert compute_cardiovascular_risk(daily, 31.0) == 85

    def test_each_dimension_takes_one_band(self):
        # activity 20 -> +20, bmi 26 -> +15, water 5 -> +8
        assert compute_cardiovascular_risk(_input(activity=20, water=5), 26.0) == 53

    def test_activity_bands(self):
        assert compute_cardiovascular_risk(_input(activity=40), 22.0) == 20
        assert compute_cardiovascular_risk(_input(activity=45), 22.0) == 10

    def test_never_exceeds_cap(self):
        for activity in (0, 10, 20, 40, 90):
            for bmi in (17.0, 26.0, 40.0):
                for water in (0, 5, 9):
                    risk = compute_cardiovascular_risk(_input(activity=activity, water=water), bmi)
                    assert 0 <= risk <= RISK_CAP

    def test_more_activity_never_increases_risk(self):
        previous = None
        for activity in range(0, 121, 5):
            risk = compute_cardiovascular_risk(_input(activity=activity, water=3), 27.0)
            if previous is not None:
                assert risk <= previous
            previous = risk


class TestHypertensionRisk:
    def test_reference_example(self):
        # mood 3 -> +12, everything else healthy, baseline +5
        assert compute_hypertension_risk(_input()) == 17

    def test_worst_day(self):
        daily = _input(mood=5, sleep=3, activity=0, screen_time=10)
        # 25 + 20 + 20 + 15 + 5 = 85
        assert compute_hypertension_risk(daily) == 85

    @pytest.mark.parametrize("screen_time,delta", [(4, 0), (4.5, 8), (6, 8), (6.5, 15), (8, 15), (8.5, 20)])
    def test_screen_time_bands(self, screen_time, delta):
        assert compute_hypertension_risk(_input(screen_time=screen_time)) == 17 + delta

    @pytest.mark.parametrize("sleep,delta", [(8, 0), (7, 0), (6.9, 10), (5, 10), (4.9, 20)])
    def test_sleep_bands(self, sleep, delta):
        assert compute_hypertension_risk(_input(sleep=sleep)) == 17 + delta

    def test_low_activity_adds_15(self):
        assert compute_hypertension_risk(_input(activity=19)) == 32
        assert compute_hypertension_risk(_input(activity=20)) == 17

    def test_good_mood_adds_nothing(self):
        assert compute_hypertension_risk(_input(mood=1)) == 5
        assert compute_hypertension_risk(_input(mood=2)) == 5
        assert compute_hypertension_risk(_input(mood=4)) == 30


class TestClassifyRisk:
    @pytest.mark.parametrize("risk,label", [
        (0, RiskLevel.LOW), (29, RiskLevel.LOW),
        (30, RiskLevel.MODERATE), (59, RiskLevel.MODERATE),
        (60, RiskLevel.HIGH), (95, RiskLevel.HIGH),
    ])
    def test_bands(self, risk, label):
        assert classify_risk(risk) is label


# ===========================================================================
# Test: Orchestrator
# ===========================================================================

class TestComputeMetrics:
    def test_example_a(self):
        metrics = compute_metrics(_profile(), _input())
        assert metrics.score == 94
        assert metrics.bmi == 22.0
        assert metrics.health_status is HealthStatus.EXCELLENT
        assert metrics.risk_labels.obesity_label is RiskLevel.LOW
        assert metrics.risk_metrics.obesity_risk == 10
        assert metrics.risk_metrics.cardiovascular_risk == 10
        assert metrics.risk_labels.cardio_label is RiskLevel.LOW
        assert metrics.risk_metrics.hypertension_risk == 17
        assert metrics.risk_labels.hyper_label is RiskLevel.LOW

    def test_example_b(self):
        daily = _input(mood=5, sleep=3, activity=0, water=0, screen_time=10, posture_score=40)
        metrics = compute_metrics(_profile(), daily)
        assert metrics.score == 6
        assert metrics.health_status is HealthStatus.CRITICAL
        # activity<15 +30, bmi 22 +0, water<4 +15, baseline +10
        assert metrics.risk_metrics.cardiovascular_risk == 55
        assert metrics.risk_labels.cardio_label is RiskLevel.MODERATE
        assert metrics.risk_metrics.hypertension_risk == 85
        assert metrics.risk_labels.hyper_label is RiskLevel.HIGH

    def test_idempotent(self):
        profile, daily = _profile(weight=82, height=178), _input(mood=4, sleep=6)
        assert compute_metrics(profile, daily) == compute_metrics(profile, daily)

    def test_waist_hip_and_gender_do_not_affect_metrics(self):
        base = compute_metrics(Profile(), _input())
        other = compute_metrics(Profile(waist=120, hip=130, age=70, name="X"), _input())
        assert base == other

    def test_zero_height_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_metrics(_profile(height=0), _input())

    def test_status_color_and_emoji_follow_status(self):
        metrics = compute_metrics(_profile(), _input())
        assert metrics.status_color == "#27ae60"
        assert metrics.status_emoji == "💪"

    def test_to_dict_is_json_ready(self):
        data = compute_metrics(_profile(), _input()).to_dict()
        assert data["health_status"] == "Excellent Health"
        assert data["risk_labels"] == {
            "obesity_label": "Low",
            "cardio_label": "Low",
            "hyper_label": "Low",
        }
        assert data["risk_metrics"]["hypertension_risk"] == 17
