"""External collaborators of the engine: posture capture and input parsing."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class PostureScanUnavailable(RuntimeError):
    """Raised by a scanner when no posture reading can be captured."""


@runtime_checkable
class PostureScanner(Protocol):
    """Abstract interface for posture capture.

    The check-in flow awaits a scan without knowing whether it comes from
    a camera pipeline or a simulator. The engine only ever sees the integer.
    """

    async def scan(self) -> int:
        """Capture one posture reading in [0, 100]."""
        ...

    @property
    def source(self) -> str:
        """Label for the active scanner: 'camera' or 'mock'."""
        ...
