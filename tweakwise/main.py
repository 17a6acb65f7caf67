"""Tweakwise frontend service main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tweakwise.api.feeds import router as feeds_router
from tweakwise.api.health import router as health_router
from tweakwise.api.middleware import setup_middleware
from tweakwise.api.storefront import router as storefront_router
from tweakwise.domain.version import PlatformVersionProbe
from tweakwise.infrastructure.config import settings


def configure_logging(log_level: str) -> None:
    """Configure stdlib logging and the structlog processor chain.

    Args:
        log_level: Root logging level name, e.g. ``INFO``.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(getattr(logging, log_level.upper()))
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Configured platform versions are parsed at startup so a bad value
    fails fast instead of on the first render.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    probe = PlatformVersionProbe.from_settings(settings)
    logger.info(
        "Starting Tweakwise frontend service",
        version=settings.api_version,
        debug=settings.debug,
        platform_version=settings.platform_version,
        listing_behavior=probe.listing_behavior().value,
    )

    yield

    logger.info("Shutting down Tweakwise frontend service")


app = FastAPI(
    title="Tweakwise Frontend",
    description="Tweakwise search and navigation configuration for storefront renders",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(storefront_router)
app.include_router(feeds_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": getattr(request.state, "request_id", None),
        },
    )
