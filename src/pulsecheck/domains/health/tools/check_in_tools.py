"""MCP tools for the daily check-in flow.

sign_up -> update_daily_input -> run_posture_scan | skip_posture_scan
-> submit_check_in. The session keeps one profile and one pending input
in memory; nothing is persisted.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from fastmcp import Context, FastMCP

if TYPE_CHECKING:
    from pulsecheck.core.audit.logger import AuditLogger
    from pulsecheck.domains.health.connectors import PostureScanner
    from pulsecheck.domains.health.domain_logic.check_in_session import CheckInSession

from pulsecheck.domains.health.connectors.input_parsing import (
    parse_daily_input,
    parse_profile,
)
from pulsecheck.domains.health.connectors.posture_scan import scan_or_default
from pulsecheck.domains.health.domain_logic.metrics_models import DailyInput, Profile
from pulsecheck.domains.health.tools.tool_support import (
    audited,
    check_inputs,
    metrics_payload,
)

RawNumber = float | str | None


def _profile_dict(profile: Profile) -> dict[str, Any]:
    data = asdict(profile)
    data["gender"] = profile.gender.value
    return data


def _input_dict(daily_input: DailyInput) -> dict[str, Any]:
    return asdict(daily_input)


def register_check_in_tools(
    mcp: FastMCP,
    session: CheckInSession,
    scanner: PostureScanner | None,
    *,
    default_posture_score: int = 82,
    strict_validation: bool = True,
    audit_logger: AuditLogger | None = None,
) -> None:
    """Register check-in session tools on the MCP server."""

    @mcp.tool
    async def sign_up(
        ctx: Context,
        name: str = "",
        age: RawNumber = None,
        gender: str | None = None,
        weight: RawNumber = None,
        height: RawNumber = None,
        waist: RawNumber = None,
        hip: RawNumber = None,
    ) -> str:
        """Create or replace the profile used for check-ins.

        Missing or unparsable measurements fall back to the defaults
        (age 25, female, 60 kg, 165 cm, waist 70 cm, hip 95 cm).

        Args:
            name: Display name.
            age: Age in years.
            gender: 'female', 'male' or 'other'.
            weight: Weight in kilograms.
            height: Height in centimeters.
            waist: Waist circumference in centimeters.
            hip: Hip circumference in centimeters.
        """
        raw = {
            "name": name, "age": age, "gender": gender, "weight": weight,
            "height": height, "waist": waist, "hip": hip,
        }

        def _body() -> dict[str, Any]:
            profile = parse_profile(raw)
            check_inputs(strict=strict_validation, profile=profile)
            metrics = session.sign_up(profile)
            return {
                "profile": _profile_dict(profile),
                "baseline_metrics": metrics_payload(metrics),
            }

        return audited(audit_logger, "sign_up", {k: v for k, v in raw.items() if k != "name"}, _body)

    @mcp.tool
    async def update_daily_input(
        ctx: Context,
        mood: RawNumber = None,
        sleep: RawNumber = None,
        activity: RawNumber = None,
        water: RawNumber = None,
        screen_time: RawNumber = None,
    ) -> str:
        """Set today's check-in values. Omitted values keep their current setting.

        Args:
            mood: 1 (best) to 5 (worst).
            sleep: Hours slept.
            activity: Minutes of physical activity.
            water: Glasses of water.
            screen_time: Hours of screen time.
        """
        raw = {
            k: v for k, v in {
                "mood": mood, "sleep": sleep, "activity": activity,
                "water": water, "screen_time": screen_time,
            }.items() if v is not None
        }

        def _body() -> dict[str, Any]:
            updated = parse_daily_input(raw, base=session.pending_input)
            check_inputs(strict=strict_validation, daily_input=updated)
            session.update_input(updated)
            return {"pending_input": _input_dict(updated)}

        return audited(audit_logger, "update_daily_input", raw, _body)

    @mcp.tool
    async def run_posture_scan(ctx: Context) -> str:
        """Capture a posture reading and store it on today's check-in.

        Falls back to the default posture score when capture is unavailable.
        """
        posture_score, outcome = await scan_or_default(scanner, default_posture_score)
        updated = session.set_posture_score(posture_score)
        if audit_logger is not None:
            audit_logger.log_tool_call(
                tool_name="run_posture_scan",
                metadata={"outcome": outcome},
            )
        return _posture_response(posture_score, outcome, updated)

    @mcp.tool
    async def skip_posture_scan(ctx: Context) -> str:
        """Skip the camera and use the default posture score."""
        posture_score, outcome = await scan_or_default(None, default_posture_score)
        updated = session.set_posture_score(posture_score)
        if audit_logger is not None:
            audit_logger.log_tool_call(
                tool_name="skip_posture_scan",
                metadata={"outcome": outcome},
            )
        return _posture_response(posture_score, outcome, updated)

    def _posture_response(posture_score: int, outcome: str, updated: DailyInput) -> str:
        return json.dumps({
            "status": "ok",
            "posture_score": posture_score,
            "outcome": outcome,
            "pending_input": _input_dict(updated),
        })

    @mcp.tool
    async def submit_check_in(ctx: Context) -> str:
        """Generate results for today's check-in and start a fresh one.

        Returns the score, status tier, risk bands and prioritized
        recommendations. The pending input is reset afterwards.
        """
        def _body() -> dict[str, Any]:
            result = session.submit()
            return {
                "submitted_input": _input_dict(result.daily_input),
                "metrics": metrics_payload(result.metrics, result.daily_input),
                "recommendations": [r.to_dict() for r in result.recommendations],
            }

        return audited(audit_logger, "submit_check_in", {}, _body)

    @mcp.tool
    async def get_check_in_state(ctx: Context) -> str:
        """Show the current profile, pending input and last results."""
        def _body() -> dict[str, Any]:
            last = session.last_result
            return {
                "profile": _profile_dict(session.profile),
                "pending_input": _input_dict(session.pending_input),
                "last_metrics": metrics_payload(last.metrics) if last is not None else None,
            }

        return audited(audit_logger, "get_check_in_state", {}, _body)
