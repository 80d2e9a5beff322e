"""FastAPI application for the catering back-office."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, StorageBackend, get_settings

from .db import create_session_factory
from .domain.errors import CateringError
from .middlewares import LoggingMiddleware, RequestIdMiddleware
from .obs import configure_logging
from .repos.catering_repo import CateringRepo
from .repos_memory import CateringRepoMemory
from .repos_sqlalchemy import CateringRepoSQL
from .routes_catalog import router as catalog_router
from .routes_dashboard import router as dashboard_router
from .routes_quotes import router as quotes_router
from .seed import seed_demo_data
from .utils.responses import error_response

logger = logging.getLogger("catering")


def build_repo(settings: Settings) -> CateringRepo:
    """Return the store selected by ``settings.storage_backend``."""

    if settings.storage_backend == StorageBackend.SQLALCHEMY:
        session_factory, _ = create_session_factory(settings.database_url)
        return CateringRepoSQL(session_factory)
    return CateringRepoMemory()


def create_app(
    settings: Settings | None = None,
    repo: CateringRepo | None = None,
    seed: bool | None = None,
) -> FastAPI:
    """Build the application.

    ``repo`` overrides the configured store and ``seed`` overrides
    ``settings.seed_demo_data``.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level.upper())

    app = FastAPI(title="Catering Quotes API", version="1.0.0")
    app.state.repo = repo if repo is not None else build_repo(settings)
    if settings.seed_demo_data if seed is None else seed:
        seed_demo_data(app.state.repo)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(catalog_router)
    app.include_router(quotes_router)
    app.include_router(dashboard_router)

    @app.exception_handler(CateringError)
    async def catering_error_handler(request: Request, exc: CateringError):
        logger.warning(
            "%s: %s", exc.code, exc.message, extra={"path": request.url.path}
        )
        return error_response(exc.status_code, exc.code, exc.message, hint=exc.hint)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, exc.status_code, exc.detail)

    return app


app = create_app()
