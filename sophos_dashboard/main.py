"""
FastAPI application entrypoint for the endpoint dashboard backend.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI

from sophos_dashboard.api.routes import router as api_router
from sophos_dashboard.core.config import AppSettings, get_settings
from sophos_dashboard.core.logging import configure_logging

DISTRIBUTION_NAME = "sophos-endpoint-dashboard"

logger = logging.getLogger(__name__)


def package_version() -> str:
    """Installed distribution version; source checkouts report ``0.0.0``."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Factory for the FastAPI application.

    Interactive API docs are only served outside ``production``; the packaged
    desktop build talks to the routes directly.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    expose_docs = settings.environment != "production"
    app = FastAPI(
        title="Sophos Endpoint Dashboard",
        version=package_version(),
        description="Local backend serving Sophos Central endpoint inventory to the dashboard UI.",
        docs_url="/docs" if expose_docs else None,
        redoc_url="/redoc" if expose_docs else None,
        openapi_url="/openapi.json" if expose_docs else None,
    )
    app.state.environment = settings.environment
    app.include_router(api_router, prefix="/api")
    logger.info("Dashboard backend ready (environment=%s)", settings.environment)
    return app


app = create_app()

__all__ = ["app", "create_app", "package_version"]
