from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from property_site.api.api_v1 import api_router
from property_site.api.site import site_router
from property_site.core.config import settings
from property_site.core.errors import PropertySiteError
from property_site.core.logging_config import configure_logging
from property_site.db.base import Base
from property_site.db.session import engine

import property_site.models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("database_ready url=%s", engine.url.render_as_string(hide_password=True))
    yield


def _allowed_origin(origin: str | None) -> str | None:
    if "*" in settings.CORS_ORIGINS:
        return origin or "*"
    if origin and origin in settings.CORS_ORIGINS:
        return origin
    return None


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg', 'invalid value')}" if loc else str(first.get("msg"))


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        allowed = _allowed_origin(request.headers.get("origin"))
        if allowed is None:
            return response
        response.headers["Access-Control-Allow-Origin"] = allowed

        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, PATCH, DELETE, OPTIONS"
        request_headers = request.headers.get("Access-Control-Request-Headers")
        if request_headers:
            response.headers["Access-Control-Allow-Headers"] = request_headers
        else:
            response.headers["Access-Control-Allow-Headers"] = "*"

        response.headers["Access-Control-Allow-Credentials"] = "false"
        return response

    @app.exception_handler(PropertySiteError)
    async def property_site_error_handler(request: Request, exc: PropertySiteError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(site_router)
    app.include_router(api_router, prefix=settings.API_V1_STR)

    # StaticFiles checks its directory on construction.
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    os.makedirs(settings.PUBLIC_DIR, exist_ok=True)

    # Mounted after the routers so the catch-all "/" never shadows them.
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR),
        name="uploads",
    )
    app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")

    return app


app = create_app()
