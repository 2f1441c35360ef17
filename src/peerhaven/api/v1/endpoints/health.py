"""
Health Check Endpoints

Provides system health and readiness endpoints for:
- Load balancer health checks
- Kubernetes probes
- Monitoring systems
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from peerhaven import __version__
from peerhaven.config import get_settings
from peerhaven.services.container import ServiceContainer, get_container

router = APIRouter()

REQUIRED_COMPONENTS = ("knowledge_store", "contact_store", "helper_store")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness check response with component health."""
    
    ready: bool
    components: dict[str, bool]


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Basic health check endpoint for load balancers",
)
async def health_check() -> HealthResponse:
    """Returns 200 while the application is running."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=get_settings().env,
    )


@router.get(
    "/live",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def liveness_check() -> HealthResponse:
    return HealthResponse(
        status="alive",
        version=__version__,
        environment=get_settings().env,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Detailed readiness check including all stores",
)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Detailed readiness check.
    
    Ready when every store answers. Speech is reported but not
    required (the assistant degrades to text).
    """
    components = await container.health_check()
    ready = all(components.get(name, False) for name in REQUIRED_COMPONENTS)
    if "database" in components:
        ready = ready and components["database"]
    return ReadinessResponse(ready=ready, components=components)
