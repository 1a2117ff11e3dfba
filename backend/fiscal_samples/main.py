"""
FiscalAPI Samples — FastAPI Application Factory
=================================================

What:  Builds the FastAPI application: logging, middleware, error handlers
       and the demo routers.
How:   create_app() returns a configured instance; uvicorn serves the
       module-level `app` (uvicorn fiscal_samples.main:app).

Application Layout:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware:  Request ID → Access Log → GZip → CORS      │
    │                                                          │
    │  Routers:     apikeys · catalogs · certificates · people │
    │               products · downloadcatalogs                │
    │               downloadrules · downloadrequests · health  │
    │                                                          │
    │  Errors:      NotFound→404 · FileStorage→500             │
    │               FiscalApiUnavailable→503 · other→500       │
    └──────────────────────────────────────────────────────────┘

A failed FiscalAPI call is not an exception here: the routes turn it into
a 400 carrying FiscalAPI's envelope. The handlers below only cover errors
raised by this application itself.

Lifecycle:
    Startup:  configure logging, report missing credentials, create the
              downloads directory
    Shutdown: close the shared httpx connection pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from fiscal_samples import __version__
from fiscal_samples.config import settings
from fiscal_samples.exceptions import (
    FiscalApiUnavailableError,
    FiscalSamplesError,
    FileStorageError,
    NotFoundError,
)
from fiscal_samples.middleware.logging import RequestLoggingMiddleware
from fiscal_samples.middleware.request_id import RequestIDMiddleware, request_id_var
from fiscal_samples.routes import (
    api_keys,
    catalogs,
    certificates,
    download_catalogs,
    download_requests,
    download_rules,
    health,
    people,
    products,
)
from fiscal_samples.services.fiscal_client import fiscal_client

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2026-01-15T12:00:00 [INFO] fiscal_samples.access: GET /api/... 200
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # httpx logs every request line at INFO; the access log already covers it
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("FiscalAPI Samples %s starting up...", __version__)
    logger.info("FiscalAPI base URL: %s", settings.fiscalapi_url)

    # Missing credentials are reported, not fatal: /health and the docs
    # still work, and every FiscalAPI route answers with FiscalAPI's refusal.
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    downloads = Path(settings.downloads_root)
    downloads.mkdir(parents=True, exist_ok=True)
    logger.info("Downloads directory: %s", downloads.resolve())

    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("FiscalAPI Samples shutting down...")
    await fiscal_client.aclose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map this application's own exceptions to ErrorResponse bodies.

        NotFoundError              → 404
        FileStorageError           → 500
        FiscalApiUnavailableError  → 503 (+ Retry-After)
        FiscalSamplesError (base)  → 500
        Exception (fallback)       → 500, generic message, stack trace logged
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] Not found: %s", rid, exc.message)
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        rid = request_id_var.get("")
        logger.error("[%s] File storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "file_storage_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(FiscalApiUnavailableError)
    async def handle_fiscalapi_unavailable(request: Request, exc: FiscalApiUnavailableError):
        rid = request_id_var.get("")
        logger.error("[%s] FiscalAPI unavailable: %s | Context: %s", rid, exc.message, exc.context)
        headers = {}
        if exc.retry_after:
            headers["Retry-After"] = str(exc.retry_after)
        return JSONResponse(
            status_code=503,
            content={
                "error": "fiscalapi_unavailable",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
            headers=headers,
        )

    @app.exception_handler(FiscalSamplesError)
    async def handle_app_error(request: Request, exc: FiscalSamplesError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, outside RequestIDMiddleware, after the
        # ContextVar was reset; request.state shares the request's scope.
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="FiscalAPI Samples",
        description=(
            "Demonstration endpoints for the FiscalAPI electronic invoicing service: "
            "API keys, SAT catalogs, CSD certificates, people, products and SAT bulk "
            "downloads. Each endpoint sends a fixed sample request and returns "
            "FiscalAPI's answer."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Last added runs first: RequestID → Logging → GZip → CORS
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers refuse credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(api_keys.router)
    app.include_router(catalogs.router)
    app.include_router(certificates.router)
    app.include_router(people.router)
    app.include_router(products.router)
    app.include_router(download_catalogs.router)
    app.include_router(download_rules.router)
    app.include_router(download_requests.router)
    app.include_router(health.router)

    return app


app = create_app()
