#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
FlatWiki — FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from flatwiki.core.config import Settings, get_settings
from flatwiki.schemas import HealthResponse
from flatwiki.services.pages import PageStore
from flatwiki.ui import views

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A minimal flat-file wiki with [PageName] links.",
        debug=settings.debug,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # ── Configuration, store and templates are fixed for the app's lifetime ─

    app.state.settings = settings
    app.state.store = PageStore(
        settings.data_dir,
        suffix=settings.page_suffix,
        file_mode=settings.page_file_mode,
    )
    app.state.templates = Jinja2Templates(directory=str(settings.template_dir))

    # ── UI (Jinja2) router ────────────────────────────────────────────────

    app.include_router(views.router)

    # ── Global exception handlers ─────────────────────────────────────────

    @app.exception_handler(404)
    async def not_found(request: Request, exc):
        return PlainTextResponse("404 page not found", status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(500)
    async def server_error(request: Request, exc):
        log.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"], response_model=HealthResponse)
    async def health():
        return HealthResponse(version=settings.app_version, app=settings.app_name)

    return app


# -----------------------------------------------------------------------------

def run() -> None:
    """Console entry point: serve the wiki with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    log.info("Serving %s from %s", settings.site_name, settings.data_dir.resolve())
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


# -----------------------------------------------------------------------------

app = create_app()


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    run()


# -----------------------------------------------------------------------------
