"""Lens Selector — read-only lookup service for lens documents.

Main FastAPI application with lifespan management, CORS, request logging and
global error handling. Lenses are re-discovered from disk on every request.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lens_selector import __version__
from lens_selector.config import Settings, get_settings
from lens_selector.api.router import api_router
from lens_selector.api.lenses import LensNotFoundError
from lens_selector.models.responses import ErrorResponse, ServiceInfoResponse

logger = structlog.get_logger()

VERSION = __version__


def configure_logging(settings: Settings) -> None:
    """Configure structured logging for the process."""
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def _error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        status_code=status_code,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info(
        "app_starting",
        environment=settings.ENVIRONMENT,
        lenses_folder=settings.LENSES_FOLDER,
        live_reload=True,
    )

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Lens Selector",
        description=(
            "Read-only lookup service for lens documents. "
            "Lenses are discovered from a folder of JSON files on every request."
        ),
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ──

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Access log for every request."""
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response

    # ── Exception Handlers ──

    @app.exception_handler(LensNotFoundError)
    async def lens_not_found_handler(request: Request, exc: LensNotFoundError):
        return _error_response(request, 404, "Not Found", str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error_response(
                request, 404, "Not Found", f"The requested resource '{request.url.path}' was not found"
            )
        return _error_response(request, exc.status_code, "HTTP Error", str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all error handler for unhandled exceptions."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(request, 500, "Internal Server Error", "An unexpected error occurred.")

    # ── Routes ──

    app.include_router(api_router)

    @app.get("/", response_model=ServiceInfoResponse)
    async def root():
        """Root endpoint — API info."""
        return ServiceInfoResponse(
            name="Lens Selector",
            version=VERSION,
            description="Read-only lookup service for lens documents",
            docs="/docs",
            health="/health",
            lenses="/lenses",
        )

    return app


app = create_app()
