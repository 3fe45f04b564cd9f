"""MCP tools for stateless health metric computation.

Each call parses the raw values at the boundary, optionally validates
them, and hands typed inputs to the deterministic engine. Nothing is
stored between calls.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any

from fastmcp import Context, FastMCP

if TYPE_CHECKING:
    from pulsecheck.core.audit.logger import AuditLogger

from pulsecheck.domains.health.connectors.input_parsing import (
    parse_daily_input,
    parse_profile,
)
from pulsecheck.domains.health.connectors.mock_trend import weekly_trend_series
from pulsecheck.domains.health.domain_logic.metrics_calculator import compute_metrics
from pulsecheck.domains.health.domain_logic.recommendation_selector import (
    select_home_suggestions,
    select_recommendations,
)
from pulsecheck.domains.health.tools.tool_support import (
    audited,
    check_inputs,
    metrics_payload,
)

logger = logging.getLogger(__name__)

RawNumber = float | str | None


def _present(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def register_health_metrics_tools(
    mcp: FastMCP,
    *,
    strict_validation: bool = True,
    audit_logger: AuditLogger | None = None,
) -> None:
    """Register the stateless metric and recommendation tools on the MCP server."""

    @mcp.tool
    async def compute_health_metrics(
        ctx: Context,
        mood: RawNumber = None,
        sleep: RawNumber = None,
        activity: RawNumber = None,
        water: RawNumber = None,
        screen_time: RawNumber = None,
        posture_score: RawNumber = None,
        age: RawNumber = None,
        weight: RawNumber = None,
        height: RawNumber = None,
        gender: str | None = None,
    ) -> str:
        """Compute the daily health score, BMI, status tier and risk bands.

        Omitted values take the defaults (profile: age 25, 60 kg, 165 cm;
        daily: mood 3, posture 82, everything else 0).

        Args:
            mood: 1 (best) to 5 (worst).
            sleep: Hours slept.
            activity: Minutes of physical activity.
            water: Glasses of water.
            screen_time: Hours of screen time.
            posture_score: Posture reading 0-100.
            age: Age in years.
            weight: Weight in kilograms.
            height: Height in centimeters.
            gender: 'female', 'male' or 'other' (display only).
        """
        raw_profile = _present({"age": age, "weight": weight, "height": height, "gender": gender})
        raw_daily = _present({
            "mood": mood, "sleep": sleep, "activity": activity, "water": water,
            "screen_time": screen_time, "posture_score": posture_score,
        })

        def _body() -> dict[str, Any]:
            profile = parse_profile(raw_profile)
            daily_input = parse_daily_input(raw_daily)
            check_inputs(strict=strict_validation, profile=profile, daily_input=daily_input)
            metrics = compute_metrics(profile, daily_input)
            logger.info(
                "Metrics computed: score=%d status=%s", metrics.score, metrics.health_status.name
            )
            return {"metrics": metrics_payload(metrics, daily_input)}

        return audited(
            audit_logger, "compute_health_metrics", {**raw_profile, **raw_daily}, _body
        )

    @mcp.tool
    async def get_recommendations(
        ctx: Context,
        mood: RawNumber = None,
        sleep: RawNumber = None,
        activity: RawNumber = None,
        water: RawNumber = None,
        screen_time: RawNumber = None,
        posture_score: RawNumber = None,
        weight: RawNumber = None,
        height: RawNumber = None,
    ) -> str:
        """Compute metrics and return prioritized, personalized recommendations.

        Recommendations are ordered by priority. Each carries an icon, a
        title, plain text, and a pre-rendered markup string.

        Args:
            mood: 1 (best) to 5 (worst).
            sleep: Hours slept.
            activity: Minutes of physical activity.
            water: Glasses of water.
            screen_time: Hours of screen time.
            posture_score: Posture reading 0-100.
            weight: Weight in kilograms.
            height: Height in centimeters.
        """
        raw_profile = _present({"weight": weight, "height": height})
        raw_daily = _present({
            "mood": mood, "sleep": sleep, "activity": activity, "water": water,
            "screen_time": screen_time, "posture_score": posture_score,
        })

        def _body() -> dict[str, Any]:
            profile = parse_profile(raw_profile)
            daily_input = parse_daily_input(raw_daily)
            check_inputs(strict=strict_validation, profile=profile, daily_input=daily_input)
            metrics = compute_metrics(profile, daily_input)
            recommendations = select_recommendations(daily_input, metrics)
            logger.info("Selected %d recommendations", len(recommendations))
            return {
                "score": metrics.score,
                "health_status": metrics.health_status.label,
                "recommendations": [r.to_dict() for r in recommendations],
            }

        return audited(
            audit_logger, "get_recommendations", {**raw_profile, **raw_daily}, _body
        )

    @mcp.tool
    async def get_home_suggestions(
        ctx: Context,
        weight: RawNumber = None,
        height: RawNumber = None,
    ) -> str:
        """Suggestions for today based on body measurements alone.

        Args:
            weight: Weight in kilograms.
            height: Height in centimeters.
        """
        raw_profile = _present({"weight": weight, "height": height})

        def _body() -> dict[str, Any]:
            profile = parse_profile(raw_profile)
            check_inputs(strict=strict_validation, profile=profile)
            return {"suggestions": [s.to_dict() for s in select_home_suggestions(profile)]}

        return audited(audit_logger, "get_home_suggestions", raw_profile, _body)

    @mcp.tool
    async def weekly_score_trend(
        ctx: Context,
        current_score: int,
        seed: int | None = None,
    ) -> str:
        """Illustrative seven-day score trend ending with today's score.

        The six earlier days are simulated for chart display only.

        Args:
            current_score: Today's composite score (0-100).
            seed: Optional RNG seed for a reproducible series.
        """
        def _body() -> dict[str, Any]:
            rng = random.Random(seed)
            return {
                "simulated": True,
                "trend": weekly_trend_series(current_score, rng),
            }

        return audited(
            audit_logger, "weekly_score_trend", {"current_score": current_score}, _body
        )
