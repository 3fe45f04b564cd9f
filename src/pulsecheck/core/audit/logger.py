"""Audit logger: PHI-free record of tool invocations.

Every tool call is recorded without its raw inputs:

* ``tool_input_hash``: SHA-256 of canonical JSON (no profile values in logs).
* ``status`` / ``error_type``: whether the call succeeded and why not.

Events live in a bounded in-memory buffer (nothing is persisted) and are
mirrored to the ``pulsecheck.audit`` logger.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import uuid
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

audit_stream = logging.getLogger("pulsecheck.audit")


# ---------------------------------------------------------------------------
# Input hashing
# ---------------------------------------------------------------------------

def _hash_input(data: Any) -> str:
    """SHA-256 hash of canonical JSON, so no raw health data in audit logs.

    Args:
        data: Tool input to hash. Must be JSON-serializable.

    Returns:
        Hex-encoded SHA-256 digest, or empty string on failure.
    """
    try:
        canonical = json.dumps(data, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode()).hexdigest()
    except (TypeError, ValueError):
        return ""


# ---------------------------------------------------------------------------
# AuditEvent dataclass
# ---------------------------------------------------------------------------

@dataclass
class AuditEvent:
    """A single audit log entry."""

    action: str                          # 'tool_invocation'
    tool_name: str = ""
    tool_input_hash: str = ""
    duration_ms: float | None = None
    status: str = "success"              # 'success' | 'failure'
    error_type: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    id: str = ""
    timestamp: str = ""


# ---------------------------------------------------------------------------
# AuditLogger
# ---------------------------------------------------------------------------

class AuditLogger:
    """Keeps the most recent audit events in memory.

    Thread-safe; the oldest events are dropped once ``capacity`` is reached.

    Usage::

        audit = AuditLogger(capacity=500)
        event_id = audit.log_tool_call(
            tool_name="compute_health_metrics",
            tool_input={"mood": 3, "sleep": 8},
            duration_ms=1.4,
        )
    """

    def __init__(self, capacity: int = 500) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._events: deque[AuditEvent] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._events.maxlen or 0

    # ---------------------------------------------------------------
    # Write
    # ---------------------------------------------------------------

    def log_event(self, event: AuditEvent) -> str:
        """Record an audit event and return its UUID."""
        event.id = str(uuid.uuid4())
        event.timestamp = datetime.now(timezone.utc).isoformat()
        with self._lock:
            self._events.append(event)
        audit_stream.info(
            "%s tool=%s status=%s duration_ms=%s",
            event.action,
            event.tool_name or "-",
            event.status,
            f"{event.duration_ms:.2f}" if event.duration_ms is not None else "-",
        )
        return event.id

    def log_tool_call(
        self,
        tool_name: str,
        tool_input: Any = None,
        *,
        duration_ms: float | None = None,
        status: str = "success",
        error_type: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        """Convenience wrapper for logging a tool invocation.

        Args:
            tool_name: Name of the MCP tool.
            tool_input: Tool input data (hashed, never stored raw).
            duration_ms: Tool execution duration in milliseconds.
            status: 'success' or 'failure'.
            error_type: Exception class name on failure.
            metadata: Additional non-PHI metadata.

        Returns:
            The generated event ID.
        """
        return self.log_event(AuditEvent(
            action="tool_invocation",
            tool_name=tool_name,
            tool_input_hash=_hash_input(tool_input) if tool_input else "",
            duration_ms=duration_ms,
            status=status,
            error_type=error_type,
            metadata=metadata or {},
        ))

    # ---------------------------------------------------------------
    # Read
    # ---------------------------------------------------------------

    def get_events(
        self,
        *,
        action: str | None = None,
        tool_name: str | None = None,
        since: str | None = None,
        limit: int = 50,
    ) -> list[dict[str, Any]]:
        """Query audit events with optional filters, newest first."""
        with self._lock:
            events = list(self._events)

        matched: list[dict[str, Any]] = []
        for event in reversed(events):
            if action and event.action != action:
                continue
            if tool_name and event.tool_name != tool_name:
                continue
            if since and event.timestamp < since:
                continue
            matched.append(asdict(event))
            if len(matched) >= limit:
                break
        return matched

    def count_events(self, *, since: str | None = None) -> int:
        """Count recorded events, optionally since a timestamp."""
        with self._lock:
            if since is None:
                return len(self._events)
            return sum(1 for e in self._events if e.timestamp >= since)

    def count_failures(self, *, since: str | None = None) -> int:
        with self._lock:
            return sum(
                1 for e in self._events
                if e.status == "failure" and (since is None or e.timestamp >= since)
            )
