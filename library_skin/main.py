#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Library skin — FastAPI application factory

Serves the skin against posted host state so it can be previewed and
exercised without a wiki behind it.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from jinja2 import TemplateNotFound

from library_skin.core.config import get_settings
from library_skin.routes import preferences, render
from library_skin.services.template import TemplateParserNotSetError

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    settings = get_settings()

    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A MonoBook-derived wiki skin rendered from host-supplied view data.",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # ── API routers ───────────────────────────────────────────────────────

    prefix = "/api/v1"

    app.include_router(render.router,      prefix=prefix)
    app.include_router(preferences.router, prefix=prefix)

    # ── Global exception handlers ─────────────────────────────────────────

    @app.exception_handler(TemplateNotFound)
    async def template_not_found(request: Request, exc: TemplateNotFound):
        log.error("Template not found: %s", exc.name)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"Template not found: {exc.name}"},
        )

    @app.exception_handler(TemplateParserNotSetError)
    async def parser_not_set(request: Request, exc: TemplateParserNotSetError):
        log.error("%s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"])
    async def health():
        return {"status": "ok", "version": settings.app_version, "app": settings.app_name}

    return app


# -----------------------------------------------------------------------------

app = create_app()


# -----------------------------------------------------------------------------
