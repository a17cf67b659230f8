"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is driven by environment variables."""

    # Listener
    host: str = "0.0.0.0"
    port: int = 3456
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Command execution
    command_timeout_seconds: float = 10.0
    container_runtime: str = "docker"

    # CrowdSec probe
    crowdsec_container: str = "crowdsec"
    crowdsec_metrics_command: str = "cscli metrics"

    # Decision table layout
    decision_header_lines: int = 2
    decision_delimiter: str = Field(default="|", min_length=1)
    decision_separator: str = "----"
    decision_reason_prefix: str = "crowdsecurity/"

    # Host probes
    uptime_command: str = "uptime"
    memory_command: str = "free -h"
    disk_command: str = "df -h /"

    # Front-end bundle
    static_dir: str = "dist"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Used by the process entry point only; request handlers get their
# settings through the app factory.
settings = Settings()
