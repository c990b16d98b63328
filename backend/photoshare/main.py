"""
PhotoShare Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn photoshare.main:app`), by
       `python -m photoshare`, and by the tests with a stand-in store.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │   Req ID     │→│    Logging      │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────┐ ┌────────┐ ┌────────┐ ┌─────────────────┐ │
    │  │ GET /│ │ /test* │ │ /user/*│ │ /photosOfUser/* │ │
    │  └──────┘ └────────┘ └────────┘ └─────────────────┘ │
    │  Static files from settings.static_root (fallback)  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→400 │ BadParam→400 │ Store→500      │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the MongoStore unless one was injected
    3. Connect and ping the database (failure aborts startup)
    4. Log the listening address and exported directory

    Shutdown:
    1. Close the database client
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from photoshare import __version__
from photoshare.config import Settings, settings
from photoshare.database import DocumentStore, MongoStore
from photoshare.exceptions import (
    BadParameterError,
    MissingSchemaInfoError,
    NotFoundError,
    PhotoShareError,
    StoreError,
)
from photoshare.middleware.logging import RequestLoggingMiddleware
from photoshare.middleware.request_id import RequestIDMiddleware, request_id_var
from photoshare.routes import photos, root, test, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before the database is opened.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-operation chatter from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the document store on startup and close it on shutdown.

    There is no reconnection logic: if the first ping fails the exception
    propagates and the server does not start.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    if app.state.store is None:
        app.state.store = MongoStore(app_settings.mongodb_url, app_settings.mongodb_database)
    store: DocumentStore = app.state.store

    await store.connect()

    logger.info(
        "Listening at http://%s:%d exporting the directory %s",
        app_settings.backend_host,
        app_settings.backend_port,
        Path(app_settings.static_root).resolve(),
    )

    yield

    await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        NotFoundError           → 400 "Not found"
        BadParameterError       → 400 "Bad param <value>"
        MissingSchemaInfoError  → 500 "Missing SchemaInfo"
        StoreError              → 500 JSON raw driver error (if exposed)
        PhotoShareError (base)  → 500 JSON
        Exception (fallback)    → 500 JSON, generic message
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        # Body intentionally carries no detail about why the lookup failed
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(BadParameterError)
    async def handle_bad_param(request: Request, exc: BadParameterError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s", rid, exc.message)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(MissingSchemaInfoError)
    async def handle_missing_schema_info(request: Request, exc: MissingSchemaInfoError):
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        if request.app.state.settings.expose_error_details:
            content = exc.to_dict()
        else:
            content = {"name": "StoreError", "message": "A database error occurred."}
        return JSONResponse(status_code=500, content=content)

    @app.exception_handler(PhotoShareError)
    async def handle_app_error(request: Request, exc: PhotoShareError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": "server_error", "message": exc.message, "request_id": rid},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the module singleton.
        store: Document store to serve from. When omitted a MongoStore is
               built from the settings during startup.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="PhotoShare API",
        description="Read-only JSON access to users, photos and comments, plus static files.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store

    # Last added runs first: RequestID → Logging → app
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(root.router)
    app.include_router(test.router)
    app.include_router(users.router)
    app.include_router(photos.router)

    # Mounted last so the API routes above take precedence
    app.mount(
        "/",
        StaticFiles(directory=app_settings.static_root),
        name="static",
    )

    return app


# uvicorn expects `photoshare.main:app` to be importable
app = create_app()
