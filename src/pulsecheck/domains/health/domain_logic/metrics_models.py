"""Daily health check models and domain constants.

Profiles and daily inputs are plain frozen dataclasses. Everything the
engine derives from them (status tiers, risk levels, recommendation kinds)
is a closed enum so the presentation layer can map each variant totally.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InvalidInputError(ValueError):
    """Raised when a profile or daily input field is outside its domain."""

    def __init__(self, field: str, value: object, message: str = "") -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid value for {field!r}: {value!r}")


# ---------------------------------------------------------------------------
# Closed variants
# ---------------------------------------------------------------------------

class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    OTHER = "other"


class RiskLevel(str, Enum):
    """Risk band labels shared by the obesity, cardio and hypertension risks."""

    UNDERWEIGHT = "Underweight"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


class HealthStatus(Enum):
    """Health-status tier derived from the composite score.

    Each member carries its display label, color and emoji.
    """

    EXCELLENT = ("Excellent Health", "#27ae60", "💪")
    GOOD = ("Good Health", "#2ecc71", "👍")
    FAIR = ("Fair Health - Needs Improvement", "#f39c12", "⚠️")
    POOR = ("Poor Health - Action Required", "#e67e22", "⚠️")
    CRITICAL = ("Critical - Immediate Action Needed", "#e74c3c", "🚨")

    def __init__(self, label: str, color: str, emoji: str) -> None:
        self.label = label
        self.color = color
        self.emoji = emoji


class RecommendationKind(str, Enum):
    WEIGHT_MANAGEMENT = "weight_management"
    WEIGHT_GAIN = "weight_gain"
    MAINTAIN_WEIGHT = "maintain_weight"
    INCREASE_ACTIVITY = "increase_activity"
    BOOST_ACTIVITY = "boost_activity"
    HYDRATION = "hydration"
    SCREEN_TIME = "screen_time"
    SLEEP = "sleep"
    STRESS = "stress"
    POSTURE = "posture"
    HEART_HEALTH = "heart_health"
    # Profile-only cards shown before a check-in
    UNDERWEIGHT_NUTRITION = "underweight_nutrition"
    HEALTHY_EATING = "healthy_eating"
    STAY_STRONG = "stay_strong"
    HYDRATION_GOAL = "hydration_goal"
    ACTIVITY_TARGET = "activity_target"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

DEFAULT_POSTURE_SCORE = 82


@dataclass(frozen=True)
class Profile:
    """Static user profile captured at sign-up."""

    name: str = "User"
    age: int = 25
    gender: Gender = Gender.FEMALE
    weight: float = 60.0        # kg
    height: float = 165.0       # cm
    waist: float = 70.0         # cm, not used by any score or risk
    hip: float = 95.0           # cm, not used by any score or risk


@dataclass(frozen=True)
class DailyInput:
    """One check-in's behavioral inputs."""

    mood: int = 3               # 1 = best, 5 = worst
    sleep: float = 0.0          # hours
    activity: float = 0.0       # minutes
    water: int = 0              # glasses
    screen_time: float = 0.0    # hours
    posture_score: int = DEFAULT_POSTURE_SCORE

    def with_updates(self, **changes: object) -> DailyInput:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_PROFILE = Profile()
DEFAULT_DAILY_INPUT = DailyInput()


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RiskMetrics:
    obesity_risk: int
    cardiovascular_risk: int
    hypertension_risk: int


@dataclass(frozen=True)
class RiskLabels:
    obesity_label: RiskLevel
    cardio_label: RiskLevel
    hyper_label: RiskLevel


@dataclass(frozen=True)
class HealthMetrics:
    """Output of one metrics computation. Replaced, never mutated."""

    score: int
    bmi: float
    health_status: HealthStatus
    risk_metrics: RiskMetrics
    risk_labels: RiskLabels

    @property
    def status_color(self) -> str:
        return self.health_status.color

    @property
    def status_emoji(self) -> str:
        return self.health_status.emoji

    def to_dict(self) -> dict:
        """JSON-ready representation used by the MCP tools."""
        return {
            "score": self.score,
            "bmi": self.bmi,
            "health_status": self.health_status.label,
            "status_color": self.status_color,
            "status_emoji": self.status_emoji,
            "risk_metrics": asdict(self.risk_metrics),
            "risk_labels": {
                "obesity_label": self.risk_labels.obesity_label.value,
                "cardio_label": self.risk_labels.cardio_label.value,
                "hyper_label": self.risk_labels.hyper_label.value,
            },
        }


@dataclass(frozen=True)
class Recommendation:
    """A single advice entry. Order in the containing list is its priority."""

    kind: RecommendationKind
    icon: str
    title: str
    text: str

    def as_markup(self) -> str:
        """Inline-markup rendering handed to the presentation layer as-is."""
        return f"{self.icon} <strong>{self.title}:</strong> {self.text}"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "icon": self.icon,
            "title": self.title,
            "text": self.text,
            "markup": self.as_markup(),
        }
