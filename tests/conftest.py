"""Shared test fixtures for PulseCheck tests."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSTURE_SCAN_DELAY_SECONDS", "0")
    monkeypatch.setenv("DEFAULT_POSTURE_SCORE", "82")
    monkeypatch.setenv("STRICT_INPUT_VALIDATION", "true")
    monkeypatch.setenv("AUDIT_LOG_CAPACITY", "500")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from pulsecheck.domains.health.domain_logic.metrics_models import (  # noqa: E402
    DailyInput,
    Profile,
)


def make_profile(weight: float = 60, height: float = 165, **overrides) -> Profile:
    """Create a profile with sensible defaults (BMI 22.0)."""
    return Profile(weight=weight, height=height, **overrides)


def make_input(
    mood: int = 3,
    sleep: float = 8,
    activity: float = 60,
    water: int = 8,
    screen_time: float = 2,
    posture_score: int = 85,
) -> DailyInput:
    """Create a daily input; defaults describe a very healthy day."""
    return DailyInput(
        mood=mood,
        sleep=sleep,
        activity=activity,
        water=water,
        screen_time=screen_time,
        posture_score=posture_score,
    )


@pytest.fixture
def healthy_profile() -> Profile:
    return make_profile()


@pytest.fixture
def healthy_input() -> DailyInput:
    return make_input()


@pytest.fixture
def worst_input() -> DailyInput:
    return make_input(mood=5, sleep=3, activity=0, water=0, screen_time=10, posture_score=40)


@pytest.fixture
def seeded_scanner():
    """Mock posture scanner with no delay and a fixed seed."""
    from pulsecheck.domains.health.connectors.posture_scan import MockPostureScanner

    return MockPostureScanner(delay_seconds=0, rng=random.Random(1234))


@pytest.fixture
def audit_logger():
    from pulsecheck.core.audit.logger import AuditLogger

    return AuditLogger(capacity=100)


@pytest.fixture
def session():
    from pulsecheck.domains.health.domain_logic.check_in_session import CheckInSession

    return CheckInSession()
