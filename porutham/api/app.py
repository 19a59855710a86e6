"""FastAPI application serving the porutham engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from porutham import __version__
from porutham.boot.logging import configure_logging
from porutham.config import Settings, default_settings, load_settings

from .errors import install_error_handlers
from .routers import health as health_router
from .routers import porutham as porutham_router
from .settings import settings as api_settings

LOGGER = logging.getLogger(__name__)

configure_logging()

_APP_INSTANCE: FastAPI | None = None


def _load_domain_settings() -> Settings:
    try:
        return load_settings()
    except Exception as exc:  # pragma: no cover - IO/env issues
        LOGGER.warning("Failed to load persisted settings; using defaults: %s", exc)
        return default_settings()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    ``settings`` pins the matching configuration; when omitted it is read
    from disk at startup.
    """

    app = FastAPI(
        title="Porutham API",
        version=__version__,
        default_response_class=ORJSONResponse,
        openapi_tags=[
            {"name": "porutham", "description": "Nakshatra compatibility matching."},
            {"name": "system", "description": "Operational endpoints."},
        ],
    )
    app.state.api_settings = api_settings
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=512)
    if api_settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(api_settings.cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_error_handlers(app)
    app.include_router(health_router.router)
    app.include_router(porutham_router.router)

    if settings is None:

        @app.on_event("startup")
        def _prime_settings() -> None:
            app.state.settings = _load_domain_settings()

    return app


def get_app() -> FastAPI:
    global _APP_INSTANCE
    if _APP_INSTANCE is None:
        _APP_INSTANCE = create_app()
    return _APP_INSTANCE


app = get_app()


def run() -> None:  # pragma: no cover - integration entry point
    """Run the API using Uvicorn."""

    import uvicorn

    uvicorn.run(
        "porutham.api.app:app",
        host=api_settings.host,
        port=api_settings.port,
        log_level=api_settings.log_level,
        reload=api_settings.reload,
    )


__all__ = ["app", "create_app", "get_app", "run"]
