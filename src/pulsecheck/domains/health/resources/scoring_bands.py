"""MCP Resources describing how the daily health score is built."""

from __future__ import annotations

import json

from fastmcp import FastMCP

from pulsecheck.domains.health.domain_logic.display import RISK_COLORS
from pulsecheck.domains.health.domain_logic.metrics_calculator import (
    CARDIO_BASELINE,
    HYPERTENSION_BASELINE,
    OBESITY_BANDS,
    OBESITY_TOP_BAND,
    RISK_CAP,
    STATUS_THRESHOLDS,
)
from pulsecheck.domains.health.domain_logic.metrics_models import HealthStatus

# Human-readable factor bands, most favorable first.
FACTOR_BANDS: dict[str, dict] = {
    "sleep": {
        "max_points": 25,
        "bands": ["7-9h: 25", "6-10h: 20", ">=4h: 10", "else: 0"],
    },
    "water": {
        "max_points": 15,
        "bands": [">=8: 15", ">=6: 12", ">=4: 6", ">=2: 3", "else: 0"],
    },
    "activity": {
        "max_points": 20,
        "bands": [">=60m: 20", ">=45m: 17", ">=30m: 15", ">=15m: 8", ">=5m: 4", "else: 0"],
    },
    "screen_time": {
        "max_points": 10,
        "bands": ["<=2h: 10", "<=4h: 8", "<=6h: 5", "<=10h: 2", "else: 0"],
    },
    "mood": {
        "max_points": 15,
        "bands": ["1: 15", "2: 12", "3: 9", "4: 5", "5: 2"],
    },
    "posture": {
        "max_points": 15,
        "bands": [">=85: 15", ">=70: 12", ">=60: 8", ">=50: 5", "else: 2"],
    },
}


def register_scoring_resources(mcp: FastMCP) -> None:
    """Register scoring-band discovery resources on the MCP server."""

    @mcp.resource("pulsecheck://scoring/bands")
    def scoring_bands_resource() -> str:
        """Score factors, status tiers and risk bands used by the engine."""
        return json.dumps(
            {
                "score": {"range": [0, 100], "factors": FACTOR_BANDS},
                "status_tiers": [
                    {"min_score": threshold, "label": status.label, "color": status.color}
                    for threshold, status in STATUS_THRESHOLDS
                ] + [{
                    "min_score": 0,
                    "label": HealthStatus.CRITICAL.label,
                    "color": HealthStatus.CRITICAL.color,
                }],
                "obesity_bands": [
                    {"bmi_below": upper, "label": label.value, "risk": risk}
                    for upper, label, risk in OBESITY_BANDS
                ] + [{"bmi_below": None, "label": OBESITY_TOP_BAND[0].value, "risk": OBESITY_TOP_BAND[1]}],
                "risk_cap": RISK_CAP,
                "cardio_baseline": CARDIO_BASELINE,
                "hypertension_baseline": HYPERTENSION_BASELINE,
                "risk_colors": {level.value: color for level, color in RISK_COLORS.items()},
                "disclaimer": "Heuristic bands for wellness tracking, not clinically validated.",
            },
            indent=2,
        )
