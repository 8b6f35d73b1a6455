"""
Blog API Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn blog_api.main:app`) or the `blog-api` script.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                     FastAPI App                      │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────────┐ ┌──────────┐ ┌──────────────────┐  │
    │  │  Request ID  │→│ Logging  │→│  Request Gate    │  │
    │  └──────────────┘ └──────────┘ └──────────────────┘  │
    │                                                      │
    │  Routes:                                             │
    │  /health  /api/categories  /api/posts  /api/users    │
    │  /api/notifications  /api/dev                        │
    │                                                      │
    │  Exception Handlers → { success: false, error }      │
    │  Config→500 │ Backend→500 │ 400/401/403/404/405      │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration check (warn, never exit)
    Shutdown: close the backend client's HTTP connections
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api import __version__
from blog_api.config import settings
from blog_api.database import close_backend_client
from blog_api.exceptions import (
    BackendQueryError,
    BlogAPIError,
    ConfigurationError,
)
from blog_api.middleware.gate import RequestGateMiddleware
from blog_api.middleware.logging import RequestLoggingMiddleware
from blog_api.middleware.request_id import RequestIDMiddleware, request_id_var
from blog_api.routes import categories, dev, engagement, health, posts, users
from blog_api.schemas.envelope import error_body

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: <ISO time> [LEVEL] logger.name: message
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Blog API starting up (env=%s)...", settings.app_env)

    try:
        settings.validate_backend_credentials()
    except ValueError as e:
        # Keep serving: health and preflight still work, data routes answer 500
        logger.error("Configuration error: %s", str(e))
        logger.error("Data routes will return a configuration error until this is fixed.")

    logger.info("CORS enabled for: %s", settings.cors_origin)
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Blog API shutting down...")
    await close_backend_client()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the error envelope.

    Handler hierarchy:
        ConfigurationError       → 500, fixed configuration message
        BackendQueryError        → 500, backend's own message
        BlogAPIError (others)    → the exception's status_code
        RequestValidationError   → 400, first field error
        Starlette HTTPException  → 404 "Route not found" / 405 / detail
        Exception (fallback)     → 500 "Internal server error"
    """

    @app.exception_handler(ConfigurationError)
    async def handle_configuration_error(request: Request, exc: ConfigurationError):
        rid = request_id_var.get("")
        logger.error("[%s] %s (%s %s)", rid, exc.message, request.method, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(BackendQueryError)
    async def handle_backend_error(request: Request, exc: BackendQueryError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] Backend query failed on %s %s: %s | Context: %s",
            rid,
            request.method,
            request.url.path,
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(BlogAPIError)
    async def handle_api_error(request: Request, exc: BlogAPIError):
        rid = request_id_var.get("")
        level = logging.ERROR if exc.status_code >= 500 else logging.INFO
        logger.log(level, "[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "Invalid request"
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        logger.info("[%s] Request validation failed: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content=error_body(message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = "Route not found"
        elif exc.status_code == 405:
            message = "Method not allowed"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content=error_body("Internal server error"))


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Blog Platform API",
        description=(
            "Thin JSON API in front of the blog's Supabase project: articles, "
            "categories, comments, likes and user profiles."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → Gate → routes
    app.add_middleware(
        RequestGateMiddleware,
        allow_origin=settings.cors_origin,
        allow_headers=settings.cors_allow_headers_list,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(posts.router)
    app.include_router(engagement.router)
    app.include_router(users.router)
    app.include_router(dev.router)

    return app


app = create_app()


def run() -> None:
    """Entry point for the `blog-api` console script."""
    import uvicorn

    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
