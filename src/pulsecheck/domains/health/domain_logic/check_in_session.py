"""Single-user check-in session.

Holds the current profile, the daily input being edited, and the most
recent metrics. Submitting a check-in computes fresh metrics from the
profile plus pending input, then resets the input for the next cycle.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from pulsecheck.domains.health.domain_logic.metrics_calculator import compute_metrics
from pulsecheck.domains.health.domain_logic.metrics_models import (
    DEFAULT_DAILY_INPUT,
    DEFAULT_PROFILE,
    DailyInput,
    HealthMetrics,
    Profile,
    Recommendation,
)
from pulsecheck.domains.health.domain_logic.recommendation_selector import (
    select_recommendations,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    """Everything produced by one submitted check-in."""

    daily_input: DailyInput
    metrics: HealthMetrics
    recommendations: list[Recommendation]


class CheckInSession:
    """In-memory state for one user's check-in cycle."""

    def __init__(
        self,
        profile: Profile = DEFAULT_PROFILE,
        default_input: DailyInput = DEFAULT_DAILY_INPUT,
    ) -> None:
        self._lock = threading.Lock()
        self._default_input = default_input
        self._profile = profile
        self._pending = default_input
        self._last: CheckInResult | None = None

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def pending_input(self) -> DailyInput:
        return self._pending

    @property
    def last_result(self) -> CheckInResult | None:
        return self._last

    def sign_up(self, profile: Profile) -> HealthMetrics:
        """Replace the profile and recompute metrics for the pending input.

        A profile the engine rejects is not stored.
        """
        with self._lock:
            metrics = compute_metrics(profile, self._pending)
            self._profile = profile
        logger.info("Profile replaced; baseline score %d", metrics.score)
        return metrics

    def update_input(self, daily_input: DailyInput) -> DailyInput:
        with self._lock:
            self._pending = daily_input
        return daily_input

    def set_posture_score(self, posture_score: int) -> DailyInput:
        with self._lock:
            self._pending = self._pending.with_updates(posture_score=posture_score)
            return self._pending

    def submit(self) -> CheckInResult:
        """Compute metrics and recommendations, then reset the pending input."""
        with self._lock:
            submitted = self._pending
            metrics = compute_metrics(self._profile, submitted)
            result = CheckInResult(
                daily_input=submitted,
                metrics=metrics,
                recommendations=select_recommendations(submitted, metrics),
            )
            self._last = result
            self._pending = self._default_input
        logger.info(
            "Check-in submitted: score=%d status=%s recommendations=%d",
            metrics.score,
            metrics.health_status.name,
            len(result.recommendations),
        )
        return result
