"""Health and liveness endpoints."""

from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from src import __version__
from src.core.config import settings

health_router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", service=settings.app_name, version=__version__)


@health_router.api_route(
    "/",
    methods=ALL_METHODS,
    response_class=PlainTextResponse,
    include_in_schema=False,
)
async def liveness() -> str:
    """Plain-text liveness probe stamped with the server's current time."""
    now = datetime.now().astimezone()
    return "****" + now.strftime("%a %b %d %Y %H:%M:%S GMT%z") + f" ({now.tzname()})"
