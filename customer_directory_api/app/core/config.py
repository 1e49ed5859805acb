"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, which is what the local
development setup and the test suite rely on.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    service_name: str = os.getenv("SERVICE_NAME", "customer-api")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Cross‑origin headers attached to every response.  The browser UI is
    # served from a different origin than the API, so the defaults allow
    # any origin and every verb the API uses.
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")
    cors_allow_methods: str = os.getenv("CORS_ALLOW_METHODS", "GET, POST, PUT, DELETE, OPTIONS")
    cors_allow_headers: str = os.getenv("CORS_ALLOW_HEADERS", "Content-Type, Authorization")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module.
settings = Settings()
