"""Rule-based recommendation selection.

Rules are evaluated in a fixed order and each appends at most one entry,
so the returned list is already in priority order and has no duplicates.
"""

from __future__ import annotations

from pulsecheck.domains.health.domain_logic.metrics_calculator import compute_bmi
from pulsecheck.domains.health.domain_logic.metrics_models import (
    DailyInput,
    HealthMetrics,
    Profile,
    Recommendation,
    RecommendationKind,
    RiskLevel,
)

BMI_OVERWEIGHT = 25.0
BMI_UNDERWEIGHT = 18.5


# ---------------------------------------------------------------------------
# Check-in recommendation catalog
# ---------------------------------------------------------------------------

WEIGHT_MANAGEMENT = Recommendation(
    kind=RecommendationKind.WEIGHT_MANAGEMENT,
    icon="🍎",
    title="Weight Management",
    text=(
        "Your BMI indicates overweight. Consider a balanced diet with a calorie "
        "deficit of 300-500 kcal/day combined with regular exercise."
    ),
)
WEIGHT_GAIN = Recommendation(
    kind=RecommendationKind.WEIGHT_GAIN,
    icon="🍽️",
    title="Healthy Weight Gain",
    text=(
        "Your BMI suggests underweight. Add 300-500 calories daily through "
        "nutrient-dense foods like nuts, avocados, and whole grains."
    ),
)
MAINTAIN_WEIGHT = Recommendation(
    kind=RecommendationKind.MAINTAIN_WEIGHT,
    icon="✅",
    title="Maintain Healthy Weight",
    text=(
        "Your BMI is in the healthy range. Continue your balanced diet and "
        "regular physical activity."
    ),
)
INCREASE_ACTIVITY = Recommendation(
    kind=RecommendationKind.INCREASE_ACTIVITY,
    icon="🏃",
    title="Increase Physical Activity",
    text=(
        "Start with 15 minutes of brisk walking daily and gradually increase to "
        "30 minutes. This helps improve cardiovascular health."
    ),
)
BOOST_ACTIVITY = Recommendation(
    kind=RecommendationKind.BOOST_ACTIVITY,
    icon="💪",
    title="Boost Your Activity",
    text=(
        "You're doing well! Try to reach 45-60 minutes of exercise for optimal "
        "health benefits."
    ),
)
HYDRATION = Recommendation(
    kind=RecommendationKind.HYDRATION,
    icon="💧",
    title="Hydration Alert",
    text=(
        "Set hourly reminders to drink water. Aim for at least 8 glasses "
        "(2 liters) daily to support metabolism and overall health."
    ),
)
SCREEN_TIME = Recommendation(
    kind=RecommendationKind.SCREEN_TIME,
    icon="📱",
    title="Reduce Screen Time",
    text=(
        "High screen time affects sleep and posture. Follow the 20-20-20 rule: "
        "every 20 minutes, look 20 feet away for 20 seconds."
    ),
)
SLEEP = Recommendation(
    kind=RecommendationKind.SLEEP,
    icon="😴",
    title="Improve Sleep",
    text=(
        "Aim for 7-9 hours of quality sleep. Create a bedtime routine and avoid "
        "screens 1 hour before sleep."
    ),
)
STRESS = Recommendation(
    kind=RecommendationKind.STRESS,
    icon="🧘",
    title="Stress Management",
    text=(
        "Practice daily meditation, deep breathing, or yoga for 10-15 minutes "
        "to reduce stress levels."
    ),
)
POSTURE = Recommendation(
    kind=RecommendationKind.POSTURE,
    icon="🪑",
    title="Posture Improvement",
    text=(
        "Adjust your workspace ergonomically. Do shoulder rolls and neck "
        "stretches every hour when sitting."
    ),
)
HEART_HEALTH = Recommendation(
    kind=RecommendationKind.HEART_HEALTH,
    icon="❤️",
    title="Heart Health Priority",
    text=(
        "Include cardio exercises 3-4 times per week and consider consulting a "
        "healthcare provider for blood pressure monitoring."
    ),
)


def select_recommendations(
    daily_input: DailyInput, metrics: HealthMetrics
) -> list[Recommendation]:
    """Select check-in advice for the given inputs and computed metrics.

    Exactly one BMI entry is always first. At most one activity entry
    follows. Every other rule contributes independently.
    """
    selected: list[Recommendation] = []

    if metrics.bmi >= BMI_OVERWEIGHT:
        selected.append(WEIGHT_MANAGEMENT)
    elif metrics.bmi < BMI_UNDERWEIGHT:
        selected.append(WEIGHT_GAIN)
    else:
        selected.append(MAINTAIN_WEIGHT)

    if daily_input.activity < 30:
        selected.append(INCREASE_ACTIVITY)
    elif daily_input.activity < 60:
        selected.append(BOOST_ACTIVITY)

    if daily_input.water < 8:
        selected.append(HYDRATION)

    if daily_input.screen_time > 6:
        selected.append(SCREEN_TIME)

    if daily_input.sleep < 7:
        selected.append(SLEEP)

    if daily_input.mood >= 4:
        selected.append(STRESS)

    if daily_input.posture_score < 70:
        selected.append(POSTURE)

    labels = metrics.risk_labels
    if labels.cardio_label is RiskLevel.HIGH or labels.hyper_label is RiskLevel.HIGH:
        selected.append(HEART_HEALTH)

    return selected


# ---------------------------------------------------------------------------
# Profile-only suggestions (before any check-in)
# ---------------------------------------------------------------------------

UNDERWEIGHT_NUTRITION = Recommendation(
    kind=RecommendationKind.UNDERWEIGHT_NUTRITION,
    icon="🍽️",
    title="Weight Management",
    text="Your BMI suggests underweight. Focus on calorie-dense, nutritious foods.",
)
HEALTHY_EATING = Recommendation(
    kind=RecommendationKind.HEALTHY_EATING,
    icon="🥗",
    title="Healthy Eating",
    text="Consider a balanced diet with more vegetables and lean proteins.",
)
STAY_STRONG = Recommendation(
    kind=RecommendationKind.STAY_STRONG,
    icon="💪",
    title="Stay Strong",
    text="Your BMI is healthy! Maintain with regular exercise and balanced diet.",
)
HYDRATION_GOAL = Recommendation(
    kind=RecommendationKind.HYDRATION_GOAL,
    icon="💧",
    title="Hydration Goal",
    text="Drink 8-10 glasses of water today for optimal health.",
)
ACTIVITY_TARGET = Recommendation(
    kind=RecommendationKind.ACTIVITY_TARGET,
    icon="🏃",
    title="Activity Target",
    text="Complete 30 minutes of physical activity today.",
)


def select_home_suggestions(profile: Profile) -> list[Recommendation]:
    """Suggestions shown on the home view, derived from the profile's BMI only."""
    bmi = compute_bmi(profile.weight, profile.height)
    if bmi < BMI_UNDERWEIGHT:
        first = UNDERWEIGHT_NUTRITION
    elif bmi >= BMI_OVERWEIGHT:
        first = HEALTHY_EATING
    else:
        first = STAY_STRONG
    return [first, HYDRATION_GOAL, ACTIVITY_TARGET]
