"""PulseCheck server entry point: ``pulsecheck-server`` or ``python -m pulsecheck.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from pulsecheck.core.config.settings import Settings, get_settings
from pulsecheck.core.server.app import create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _is_loopback_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def _configure_logging(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level


def _check_bind(settings: Settings) -> None:
    """Raise unless the host is loopback or the insecure-bind override is set."""
    if _is_loopback_host(settings.pulsecheck_host):
        return
    if not settings.pulsecheck_allow_insecure_bind:
        raise RuntimeError(
            f"Refusing to bind PulseCheck to non-loopback host {settings.pulsecheck_host!r}. "
            "Set PULSECHECK_ALLOW_INSECURE_BIND=true to override (unsafe)."
        )
    logger.warning("Binding to %s without an auth layer", settings.pulsecheck_host)


def run() -> None:
    """Start the PulseCheck MCP server with Streamable HTTP transport."""
    settings = get_settings()
    _configure_logging(settings.pulsecheck_log_level)
    _check_bind(settings)

    logger.info(
        "Starting PulseCheck on %s:%d (strict validation %s, default posture %d, audit capacity %d)",
        settings.pulsecheck_host,
        settings.pulsecheck_port,
        "on" if settings.strict_input_validation else "off",
        settings.default_posture_score,
        settings.audit_log_capacity,
    )

    create_app().run(
        transport="streamable-http",
        host=settings.pulsecheck_host,
        port=settings.pulsecheck_port,
    )


if __name__ == "__main__":
    run()
