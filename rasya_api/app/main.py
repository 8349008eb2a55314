"""
Main entrypoint for the Rasya Production API.

This module assembles the FastAPI application: logging, the error
envelope, the versioned routers under ``settings.api_prefix``, the
crawler files of the public site and the ``/uploads`` static mount.
Run it with uvicorn, e.g.::

    uvicorn rasya_api.app.main:app --reload
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .services.layanan_service import LayananService
from .services.preview_service import robots_txt, sitemap_xml

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse({"ok": False, "message": message}, status_code=status_code, headers=headers)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Every error leaves the API as ``{"ok": false, "message": ...}``:
    ``HTTPException`` keeps its status and detail, a body that fails
    validation becomes 400 ``invalid JSON`` and anything unexpected is
    logged and answered with 500 ``internal error``.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type", "X-Admin-Key"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
        return _error(400, "invalid JSON")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "internal error")

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {"message": "Rasya Production API", "docs": "/health"}

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok", "service": settings.service_name}

    @app.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
    async def robots() -> str:
        return robots_txt(settings.site_url)

    @app.get("/sitemap.xml", include_in_schema=False)
    async def sitemap() -> Response:
        return Response(content=sitemap_xml(settings.site_url), media_type="application/xml")

    app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the upload directory and the database, then seed the
        # default services on a fresh install.
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
        init_db()
        LayananService.seed_if_empty()

    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
