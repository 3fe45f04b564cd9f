"""Display colors for engine outputs.

Both mappings are total over their inputs, so a renderer never meets an
unmapped label.
"""

from __future__ import annotations

from pulsecheck.domains.health.domain_logic.metrics_models import RiskLevel

RISK_COLORS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "#27ae60",
    RiskLevel.MODERATE: "#f39c12",
    RiskLevel.HIGH: "#e74c3c",
    RiskLevel.VERY_HIGH: "#c0392b",
    RiskLevel.UNDERWEIGHT: "#3498db",
}


def risk_color(level: RiskLevel) -> str:
    return RISK_COLORS[level]


def score_ring_color(score: int) -> str:
    """Stroke color of the score ring: green, amber, or red."""
    if score >= 60:
        return "#27ae60"
    if score >= 40:
        return "#f39c12"
    return "#e74c3c"
