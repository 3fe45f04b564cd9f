"""MCP tools for viewing the audit trail.

The trail is PHI-free. It records which tools were used, when,
how long they took and whether they failed, with inputs only as hashes.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from fastmcp import Context, FastMCP

if TYPE_CHECKING:
    from pulsecheck.core.audit.logger import AuditLogger


def register_audit_tools(
    mcp: FastMCP,
    audit_logger: AuditLogger,
) -> None:
    """Register audit trail tools on the MCP server."""

    @mcp.tool
    async def audit_summary(
        ctx: Context,
        minutes: int = 60,
        limit: int = 20,
    ) -> str:
        """View recent tool usage recorded during this server session.

        Args:
            minutes: How far back to look (default: 60).
            limit: Maximum number of events to list (default: 20).
        """
        since = (datetime.now(timezone.utc) - timedelta(minutes=minutes)).isoformat()

        recent_events = audit_logger.get_events(since=since, limit=limit)
        display_events = [
            {
                "timestamp": event.get("timestamp"),
                "tool_name": event.get("tool_name"),
                "status": event.get("status"),
                "error_type": event.get("error_type"),
                "duration_ms": event.get("duration_ms"),
            }
            for event in recent_events
        ]

        return json.dumps({
            "status": "ok",
            "period_minutes": minutes,
            "total_events": audit_logger.count_events(since=since),
            "failures": audit_logger.count_failures(since=since),
            "recent_events": display_events,
            "note": (
                "This audit trail contains no health data. "
                "Inputs are recorded only as SHA-256 hashes and nothing is persisted."
            ),
        }, indent=2)
