"""
Main entrypoint for the Simple Health Data Server.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory ``UserDirectory``, installs the CORS filter,
registers the error handler for directory errors and includes the
API router.  The ``create_app`` function builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn health_data_api.app.main:app --port 3000

Interactive documentation is served at ``/api-docs`` and the
OpenAPI document at ``/api-docs/openapi.json``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.errors import DirectoryError
from .services.user_service import UserDirectory

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.3"


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    """Render a directory error as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(
    settings: Optional[Settings] = None,
    directory: Optional[UserDirectory] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the values read from the
        environment at import time.
    directory : Optional[UserDirectory]
        User store owned by the new application.  A freshly seeded
        directory is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        redoc_url=None,
    )
    app.openapi_version = OPENAPI_VERSION
    app.state.settings = settings
    app.state.directory = directory if directory is not None else UserDirectory()

    # Browsers send the origin without a trailing slash.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin.rstrip("/")],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DirectoryError, directory_error_handler)
    app.include_router(router)

    logger.debug("Application created with %d seeded user(s)", len(app.state.directory))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
