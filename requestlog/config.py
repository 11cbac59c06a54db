"""
Configuration layer for the request logger.

Settings are read from environment variables so the same build can run
quietly in production and dump headers while debugging locally.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.
    """

    service_name: str = os.getenv("SERVICE_NAME", "requestlog")
    environment: str = os.getenv("ENVIRONMENT", "production")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Request logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    verbose: bool = _env_flag("REQUEST_LOG_VERBOSE", "false")
    color: bool = _env_flag("REQUEST_LOG_COLOR", "true")

    # Header the demo app copies into request.state.request_id
    request_id_header: str = os.getenv("REQUEST_ID_HEADER", "X-Request-Id")


settings = Settings()
