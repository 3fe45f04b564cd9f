"""Mock weekly score trend for the comparison chart.

Display-only: the six earlier days are invented around today's score.
Randomness comes from the caller's RNG and never feeds back into scoring.
"""

from __future__ import annotations

import math
import random

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

TREND_FLOOR = 30
TREND_CEILING = 100
TREND_STEP = 2
TREND_VARIATION = 8


def generate_weekly_score_trend(
    current_score: int, rng: random.Random | None = None
) -> list[int]:
    """Return seven daily scores (Mon..Sun) ending with ``current_score``."""
    rng = rng or random.Random()
    scores: list[int] = []
    for i in range(6):
        base = current_score - (6 - i) * TREND_STEP
        jitter = math.floor(rng.random() * TREND_VARIATION) - TREND_VARIATION // 2
        scores.append(min(TREND_CEILING, max(TREND_FLOOR, base + jitter)))
    scores.append(current_score)
    return scores


def weekly_trend_series(current_score: int, rng: random.Random | None = None) -> dict[str, int]:
    """Trend keyed by weekday label."""
    return dict(zip(WEEKDAYS, generate_weekly_score_trend(current_score, rng)))
