"""Simulated posture scanner.

There is no real pose estimation behind this: after a short "analysis"
delay it yields a plausible, mostly good reading.
"""

from __future__ import annotations

import asyncio
import logging
import random

from pulsecheck.domains.health.connectors import PostureScanner, PostureScanUnavailable
from pulsecheck.domains.health.domain_logic.metrics_models import DEFAULT_POSTURE_SCORE

logger = logging.getLogger(__name__)

MOCK_SCORE_MIN = 75
MOCK_SCORE_MAX = 94


class MockPostureScanner:
    """PostureScanner that draws readings from an injectable RNG."""

    def __init__(
        self,
        *,
        delay_seconds: float = 3.0,
        rng: random.Random | None = None,
        available: bool = True,
    ) -> None:
        self._delay = delay_seconds
        self._rng = rng or random.Random()
        self._available = available

    async def scan(self) -> int:
        if not self._available:
            raise PostureScanUnavailable("Camera access denied")
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        return self._rng.randint(MOCK_SCORE_MIN, MOCK_SCORE_MAX)

    @property
    def source(self) -> str:
        return "mock"


async def scan_or_default(
    scanner: PostureScanner | None,
    default: int = DEFAULT_POSTURE_SCORE,
) -> tuple[int, str]:
    """Run a scan, falling back to ``default`` when skipped or unavailable.

    Returns:
        (posture_score, outcome) where outcome is 'captured', 'skipped'
        or 'denied'.
    """
    if scanner is None:
        return default, "skipped"
    try:
        score = await scanner.scan()
    except PostureScanUnavailable as exc:
        logger.warning("Posture scan unavailable (%s); using default %d", exc, default)
        return default, "denied"
    logger.info("Posture captured from %s scanner: %d", scanner.source, score)
    return score, "captured"
