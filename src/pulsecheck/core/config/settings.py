"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """PulseCheck server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; there is no auth layer in front of the tools.
    pulsecheck_host: str = "127.0.0.1"
    pulsecheck_port: int = 8001
    pulsecheck_log_level: str = "info"
    pulsecheck_allow_insecure_bind: bool = False

    # Posture capture
    default_posture_score: int = 82
    posture_scan_delay_seconds: float = 3.0

    # Input boundary
    strict_input_validation: bool = True

    # Audit trail (in-memory ring buffer)
    audit_log_capacity: int = 500


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
