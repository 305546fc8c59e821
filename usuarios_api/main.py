"""FastAPI entrypoint for the usuarios CRUD API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from usuarios_api.api.api import api_router
from usuarios_api.core.config import Settings, load_settings
from usuarios_api.core.config import settings as default_settings
from usuarios_api.core.exceptions import UsuariosError
from usuarios_api.core.log import configure_logging, log_requests
from usuarios_api.db.seed import build_seeded_store
from usuarios_api.db.store import UserStore

logger = logging.getLogger(__name__)

GREETING: str = "Hola mundo desde Express"


def usuarios_error_handler(request: Request, exc: UsuariosError) -> PlainTextResponse:
    """Render domain errors as plain text with their status code."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Build an application instance that owns ``store`` (seeded when omitted)."""
    settings = settings or default_settings
    store = store if store is not None else build_seeded_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Application: %s (env=%s)", settings.app_name, settings.app_env)
        logger.info("Serving %s users from memory", len(app.state.store))
        logger.info("Static directory: %s", settings.static_path)
        if settings.request_logging:
            logger.debug("Request logging enabled")
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_exception_handler(UsuariosError, usuarios_error_handler)
    if settings.request_logging:
        app.middleware("http")(log_requests)

    @app.get("/", response_class=PlainTextResponse, summary="Greeting")
    def root() -> str:
        return GREETING

    app.include_router(api_router, prefix="/api")

    # Mounted last so the API routes take precedence over files at the root.
    static_path = settings.static_path
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path), name="static")
        logger.debug("Static files served from %s", static_path)
    else:
        logger.warning("Static directory %s not found; static files disabled", static_path)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using environment settings."""
    import uvicorn

    runtime_settings = load_settings()
    configure_logging(runtime_settings.log_level)
    logger.info("Listening on port %s", runtime_settings.port)
    uvicorn.run(
        create_app(settings=runtime_settings),
        host=runtime_settings.host,
        port=runtime_settings.port,
        log_config=None,
    )
