"""
Covid Portal Backend - FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its settings and its database engine (both on app.state).
Who:   Called by uvicorn (uvicorn covid_portal.main:app) and by the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │  Req ID  │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────────┐ ┌───────────┐  │
    │  │ POST /login/ │ │ /states/ (auth)│ │/districts/│  │
    │  └──────────────┘ └────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ 4xx PortalError→text │ 5xx / Exception→JSON  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Warn about development-only settings
    3. Log startup complete

    Shutdown:
    1. Dispose database engine (close the connection)
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from covid_portal import __version__
from covid_portal.config import Settings, settings as default_settings
from covid_portal.database import build_engine, build_session_factory, dispose_engine
from covid_portal.exceptions import (
    INTERNAL_SERVER_ERROR_BODY,
    InvalidTokenError,
    PortalError,
)
from covid_portal.middleware.logging import RequestLoggingMiddleware
from covid_portal.middleware.request_id import RequestIDMiddleware, request_id_var
from covid_portal.routes import districts, login, states

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party loggers that emit a line per operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    The engine already exists (create_app built it); startup only reports,
    shutdown releases the connection.
    """
    cfg: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(cfg.log_level)
    logger.info("=" * 60)
    logger.info("Covid Portal Backend %s starting up...", __version__)

    for warning in cfg.validate_required_for_production():
        logger.warning("Configuration: %s", warning)

    logger.info("Database: %s", app.state.engine.url.render_as_string(hide_password=True))
    logger.info("Server ready at http://%s:%d", cfg.backend_host, cfg.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Covid Portal Backend shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers: the single place errors become responses.

    Handler hierarchy:
        InvalidTokenError       → 401 text "Invalid JWT Token"
        PortalError (4xx)       → its status, its message as plain text
        PortalError (5xx)       → 500 JSON {"error": "Internal Server Error"}
        RequestValidationError  → 400 JSON {"error": "Bad Request", "details": [...]}
        Exception (fallback)    → 500 JSON {"error": "Internal Server Error"}

    Security: 5xx bodies never carry internal details (SQL, paths, traces).
    Details are logged server-side with the request ID.
    """

    @app.exception_handler(InvalidTokenError)
    async def handle_invalid_token(request: Request, exc: InvalidTokenError):
        """Same body for every auth failure; the cause is only logged."""
        rid = request_id_var.get("")
        logger.info("[%s] Rejected token: %s", rid, exc.context.get("reason", type(exc).__name__))
        return PlainTextResponse(exc.message, status_code=401)

    @app.exception_handler(PortalError)
    async def handle_portal_error(request: Request, exc: PortalError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
            return JSONResponse(status_code=exc.status_code, content=INTERNAL_SERVER_ERROR_BODY)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Client sent a body or path parameter that does not fit the schema."""
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation failed: %d error(s)", rid, len(exc.errors()))
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for errors raised outside RequestLoggingMiddleware.

        Route errors are already answered by the middleware, which keeps the
        request ID header and the access line. Stack trace is logged, never returned.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content=INTERNAL_SERVER_ERROR_BODY)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to run with (default: environment-derived settings)
        engine:   Pre-built database engine (default: built from settings.database_url)

    The engine is the single storage resource shared by every request; it is
    placed on app.state together with its session factory and the settings,
    and route dependencies read all three from there.
    """
    cfg = settings or default_settings
    db_engine = engine or build_engine(cfg.database_url, echo=cfg.log_level == "DEBUG")

    app = FastAPI(
        title="Covid-19 India Portal API",
        description=(
            "Token-protected CRUD over Indian states and districts with "
            "per-state COVID-19 case totals."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.engine = db_engine
    app.state.session_factory = build_session_factory(db_engine)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(login.router)
    app.include_router(states.router)
    app.include_router(districts.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `covid_portal.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "covid_portal.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )
