"""PulseCheck daily health MCP server application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from pulsecheck.core.audit.logger import AuditLogger
from pulsecheck.core.config.settings import get_settings
from pulsecheck.domains.health.connectors import PostureScanner
from pulsecheck.domains.health.connectors.posture_scan import MockPostureScanner
from pulsecheck.domains.health.domain_logic.check_in_session import CheckInSession
from pulsecheck.domains.health.domain_logic.metrics_models import DailyInput
from pulsecheck.domains.health.prompts.health_prompts import register_health_prompts
from pulsecheck.domains.health.resources.scoring_bands import register_scoring_resources
from pulsecheck.domains.health.tools.audit_tools import register_audit_tools
from pulsecheck.domains.health.tools.check_in_tools import register_check_in_tools
from pulsecheck.domains.health.tools.health_metrics_tools import (
    register_health_metrics_tools,
)

logger = logging.getLogger(__name__)

SERVER_VERSION = "0.1.0"


def create_app(
    *,
    posture_scanner_override: PostureScanner | None = None,
    session_override: CheckInSession | None = None,
    audit_logger_override: AuditLogger | None = None,
) -> FastMCP:
    """Create and configure the PulseCheck MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Creates the audit logger
    3. Initializes the posture scanner (mock for now)
    4. Initializes the single-user check-in session
    5. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    # --- Server instance ---
    server = FastMCP(
        "PulseCheck Daily Health",
        instructions=(
            "Daily health check-in server. Computes a 0-100 wellness score, BMI, "
            "heuristic obesity/cardiovascular/hypertension risk bands and "
            "prioritized lifestyle recommendations from sleep, activity, hydration, "
            "screen time, mood and posture. Not a medical diagnostic tool."
        ),
    )

    # --- Audit trail ---
    audit_logger = audit_logger_override or AuditLogger(capacity=settings.audit_log_capacity)

    # --- Posture scanner ---
    if posture_scanner_override is not None:
        scanner = posture_scanner_override
    else:
        scanner = MockPostureScanner(delay_seconds=settings.posture_scan_delay_seconds)
        logger.info("Using mock posture scanner")

    # --- Check-in session ---
    if session_override is not None:
        session = session_override
    else:
        session = CheckInSession(
            default_input=DailyInput(posture_score=settings.default_posture_score),
        )

    if not settings.strict_input_validation:
        logger.warning(
            "Strict input validation disabled; out-of-range values fall through to the lowest bands"
        )

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "PulseCheck Daily Health",
            "version": SERVER_VERSION,
            "posture_scanner": scanner.source,
            "strict_input_validation": settings.strict_input_validation,
            "audit_events": audit_logger.count_events(),
        }

    register_health_metrics_tools(
        server,
        strict_validation=settings.strict_input_validation,
        audit_logger=audit_logger,
    )
    logger.info("Health metrics tools registered")

    register_check_in_tools(
        server,
        session,
        scanner,
        default_posture_score=settings.default_posture_score,
        strict_validation=settings.strict_input_validation,
        audit_logger=audit_logger,
    )
    logger.info("Check-in tools registered")

    register_audit_tools(server, audit_logger)

    # --- Register resources ---
    register_scoring_resources(server)

    # --- Register prompts ---
    register_health_prompts(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
