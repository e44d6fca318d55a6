"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with no configuration at all, listening on port 3000
and accepting cross‑origin requests from ``http://localhost/`` only.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Simple Health Data Server")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Network binding for the uvicorn runner.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Single origin allowed by the CORS filter.  Browsers on any other
    # origin will not receive the Access-Control-Allow-Origin header.
    cors_origin: str = os.getenv("CORS_ORIGIN", "http://localhost/")

    # Swagger UI is served here; the OpenAPI document lives beneath it
    # at ``<docs_url>/openapi.json``.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    @property
    def openapi_url(self) -> str:
        return self.docs_url.rstrip("/") + "/openapi.json"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
