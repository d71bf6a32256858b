"""Application entrypoint for the preferences service."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routers
from .core.settings import get_settings

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """Construct and configure the FastAPI application instance."""

    settings = get_settings()
    application = FastAPI(title=settings.app_name, version=settings.app_version)
    _configure_cors(application, settings.allowed_origins)
    register_routers(application)

    if not settings.prefs_source_url:
        logger.warning("No preference source URL configured; fetch endpoints will report errors")

    return application


def _configure_cors(app: FastAPI, origins: Sequence[str] | None) -> None:
    allow_all = not origins
    allow_list = ["*"] if allow_all else list(origins or [])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


app = create_application()

__all__ = ("app", "create_application")
