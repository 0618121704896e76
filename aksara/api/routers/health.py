"""
Health check API endpoints.

Routes: GET /health, GET /test

Dependencies: fastapi
System role: Health check HTTP API
"""

from fastapi import APIRouter
from pydantic import BaseModel

from aksara.models.common import SuccessResponse

from .router_utils.responses import ok


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class ServiceInfo(BaseModel):
    """Service identification payload."""

    name: str


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/test", response_model=SuccessResponse[ServiceInfo])
async def service_info() -> SuccessResponse[ServiceInfo]:
    """Smoke-test endpoint identifying the service."""
    return ok(ServiceInfo(name="Aksara API"))
