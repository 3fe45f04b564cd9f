"""Shared plumbing for the health MCP tools: timing, audit, error payloads."""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any, Callable

from pulsecheck.domains.health.domain_logic.display import risk_color, score_ring_color
from pulsecheck.domains.health.domain_logic.input_validation import (
    validate_daily_input,
    validate_profile,
)
from pulsecheck.domains.health.domain_logic.metrics_calculator import score_breakdown
from pulsecheck.domains.health.domain_logic.metrics_models import (
    DailyInput,
    HealthMetrics,
    InvalidInputError,
    Profile,
)

if TYPE_CHECKING:
    from pulsecheck.core.audit.logger import AuditLogger

logger = logging.getLogger(__name__)


def error_payload(exc: InvalidInputError) -> str:
    return json.dumps({
        "status": "error",
        "field": exc.field,
        "message": str(exc),
    })


def check_inputs(
    *,
    strict: bool,
    profile: Profile | None = None,
    daily_input: DailyInput | None = None,
) -> None:
    """Apply domain validation when strict input validation is enabled."""
    if not strict:
        return
    if profile is not None:
        validate_profile(profile)
    if daily_input is not None:
        validate_daily_input(daily_input)


def metrics_payload(metrics: HealthMetrics, daily_input: DailyInput | None = None) -> dict[str, Any]:
    """Metrics plus the display colors the presentation layer needs."""
    payload = metrics.to_dict()
    labels = metrics.risk_labels
    payload["display"] = {
        "score_ring_color": score_ring_color(metrics.score),
        "risk_colors": {
            "obesity": risk_color(labels.obesity_label),
            "cardio": risk_color(labels.cardio_label),
            "hyper": risk_color(labels.hyper_label),
        },
    }
    if daily_input is not None:
        payload["score_breakdown"] = score_breakdown(daily_input)
    return payload


def audited(
    audit_logger: AuditLogger | None,
    tool_name: str,
    tool_input: dict[str, Any],
    body: Callable[[], dict[str, Any]],
) -> str:
    """Run ``body``, audit the call, and serialize the result as JSON.

    ``InvalidInputError`` becomes an error payload instead of propagating
    through the MCP transport. Anything else is audited and re-raised.
    """
    start_time = time.monotonic()
    status = "success"
    error_type: str | None = None
    try:
        return json.dumps({"status": "ok", **body()})
    except InvalidInputError as exc:
        status, error_type = "failure", type(exc).__name__
        logger.info("%s rejected input: %s", tool_name, exc)
        return error_payload(exc)
    except Exception as exc:
        status, error_type = "failure", type(exc).__name__
        logger.exception("%s failed", tool_name)
        raise
    finally:
        if audit_logger is not None:
            audit_logger.log_tool_call(
                tool_name=tool_name,
                tool_input=tool_input,
                duration_ms=(time.monotonic() - start_time) * 1000,
                status=status,
                error_type=error_type,
            )
