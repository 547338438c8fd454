"""
StreetMap Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the engine and session factory, stores them on
       `app.state`, registers middleware, exception handlers and routers.
Who:   uvicorn (`streetmap.main:app`), the `streetmap` console script and
       the test suite (which passes its own in-memory engine).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Access Log → GZip → CORS  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐ │
    │  │  /streets    │ │ /api/*-line  │ │  /health    │ │
    │  │  /api/update │ │ /api/get-    │ │             │ │
    │  │   -color     │ │   lines      │ │             │ │
    │  └──────────────┘ └──────────────┘ └─────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  InvalidRequest→400 │ NotFound→404 │ Storage→500    │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create missing tables. An unreachable
              database is logged and the server keeps running; requests
              then fail with StorageError until it comes back.
    Shutdown: dispose the engine (close pooled connections).
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from streetmap import __version__
from streetmap.config import Settings, settings
from streetmap.database import build_engine, build_session_factory, init_models
from streetmap.exceptions import (
    InvalidRequestError,
    NotFoundError,
    StorageError,
    StreetMapError,
)
from streetmap.middleware.logging import RequestLoggingMiddleware
from streetmap.middleware.request_id import RequestIDMiddleware, request_id_var
from streetmap.routes import health, lines, streets

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure root logging once at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-operation chatter from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("StreetMap Backend %s starting up...", __version__)

    try:
        await init_models(app.state.engine)
        logger.info("Database ready")
    except Exception as e:
        logger.error(
            "Could not reach the database at startup: %s. "
            "Serving anyway; storage calls will fail until it is available.",
            str(e),
        )

    logger.info("Listening on http://%s:%d", app_settings.host, app_settings.port)

    yield

    logger.info("StreetMap Backend shutting down...")
    await app.state.engine.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int, message: str, request_id: Optional[str] = None
) -> JSONResponse:
    rid = request_id if request_id is not None else request_id_var.get("")
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "request_id": rid,
        },
        headers={"X-Request-ID": rid} if rid else None,
    )


def _request_id_for(request: Request) -> str:
    """
    Correlation id for handlers running outside RequestIDMiddleware.

    The Exception handler is installed on ServerErrorMiddleware, where the
    ContextVar has already been reset; request.state shares the ASGI scope
    with the middleware and still carries the id.
    """
    return (
        request_id_var.get("")
        or getattr(request.state, "request_id", "")
        or request.headers.get("X-Request-ID", "")
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

        InvalidRequestError     → 400
        RequestValidationError  → 400 (body could not be parsed)
        NotFoundError           → 404
        StorageError            → 500, generic message, details logged
        StreetMapError (base)   → its status_code
        Exception (fallback)    → 500, stack trace logged
    """

    @app.exception_handler(InvalidRequestError)
    async def handle_invalid_request(request: Request, exc: InvalidRequestError):
        logger.warning("[%s] Invalid request: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0].get("msg", "Invalid data") if errors else "Invalid data"
        location = ".".join(str(part) for part in errors[0].get("loc", ())) if errors else ""
        logger.warning("[%s] Unparseable request body at %s: %s", request_id_var.get(""), location, detail)
        return _error_response(400, f"Invalid data: {detail}")

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            "[%s] Storage error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, exc.message)

    @app.exception_handler(StreetMapError)
    async def handle_app_error(request: Request, exc: StreetMapError):
        logger.error("[%s] %s: %s", request_id_var.get(""), type(exc).__name__, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = _request_id_for(request)
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "Server error", request_id=rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the module singleton)
        engine: Prebuilt engine; when omitted one is built from
                app_settings.database_url

    Returns:
        Configured FastAPI instance. No connection is opened until the
        lifespan runs or the first request arrives.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="StreetMap API",
        description="Stores streets and drawn lines for a web map.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.engine = engine if engine is not None else build_engine(app_settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(streets.router)
    app.include_router(lines.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    uvicorn.run(
        "streetmap.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
