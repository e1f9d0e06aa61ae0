"""
Card Gateway - Main Application Entry Point

Forwards customer and payment-card operations to Stripe and returns
every result in a uniform ``{success, message, error, response}`` envelope.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src import __version__
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.presentation.api import api_router
from src.presentation.api.v1.health import ALL_METHODS
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging and warns when no gateway key is configured.
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    if not settings.stripe_secret_key:
        logger.warning("stripe_secret_key_missing")
    logger.info("application_started", version=__version__, port=settings.port)

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="Card Gateway",
    description="Stripe customer and payment card service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


# Must stay the last route registered
@app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def not_found(path: str) -> PlainTextResponse:
    """Fallback for unknown routes."""
    return PlainTextResponse("404 page", status_code=404)
