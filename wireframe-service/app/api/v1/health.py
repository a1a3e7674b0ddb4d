"""
Health checks for the wireframe service.
"""
from fastapi import APIRouter, Depends, status, Response
from pydantic import BaseModel, ConfigDict
from typing import Dict, Optional
from datetime import datetime, timezone
import time

from app.api.dependencies import get_provider
from app.config import settings
from app.llm import BaseLLMProvider
from app.utils.datetime_utils import to_iso_string
from app.utils.logging import get_logger, log_context

router = APIRouter()
logger = get_logger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class HealthResponse(BaseModel):
    """Simple health check response model"""
    status: str
    service: str
    version: str
    timestamp: datetime

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "status": "healthy",
            "service": "Wireframe Generation Service",
            "version": "1.0.0",
            "timestamp": "2026-01-01T12:00:00Z"
        }
    })


class LivenessResponse(BaseModel):
    """Liveness probe response"""
    status: str
    timestamp: str


class DependencyStatus(BaseModel):
    """Status of a single dependency"""
    name: str
    status: str  # "healthy", "unhealthy"
    response_time_ms: Optional[float] = None
    message: Optional[str] = None
    last_checked: str


class ReadinessResponse(BaseModel):
    """Readiness probe response"""
    status: str  # "ready", "not_ready"
    ready: bool
    dependencies: Dict[str, DependencyStatus]
    timestamp: str


# ============================================================================
# DEPENDENCY CHECKS
# ============================================================================

async def check_generation_backend(provider: BaseLLMProvider) -> DependencyStatus:
    """Ask the configured backend whether it can serve completions"""
    start = time.time()
    name = f"Generation backend ({provider.get_provider_type().value})"

    healthy = await provider.health_check()
    response_time = (time.time() - start) * 1000

    return DependencyStatus(
        name=name,
        status="healthy" if healthy else "unhealthy",
        response_time_ms=response_time,
        message=f"Model {provider.model_name} available" if healthy else "Backend health check failed",
        last_checked=to_iso_string()
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Service health check"
)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc)
    )


@router.get(
    "/health/live",
    response_model=LivenessResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Liveness probe",
    description="Process liveness only. No dependency checks."
)
async def liveness_check() -> LivenessResponse:
    return LivenessResponse(status="alive", timestamp=to_iso_string())


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    tags=["Health"],
    summary="Readiness probe",
    description="Checks that the generation backend is reachable and serving the configured model."
)
async def readiness_check(
    response: Response,
    provider: BaseLLMProvider = Depends(get_provider),
) -> ReadinessResponse:
    """
    Readiness probe - Can this instance receive traffic?

    Failure = 503, remove from load balancer pool.
    """
    with log_context(endpoint="/health/ready"):
        start_time = time.time()

        dependencies = {"generation_backend": await check_generation_backend(provider)}
        ready = all(dep.status == "healthy" for dep in dependencies.values())
        check_duration = (time.time() - start_time) * 1000

        if ready:
            logger.info(
                "health.readiness.passed",
                extra={"check_duration_ms": check_duration}
            )
        else:
            logger.warning(
                "health.readiness.failed",
                extra={
                    "check_duration_ms": check_duration,
                    "unhealthy": [k for k, v in dependencies.items() if v.status != "healthy"]
                }
            )
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return ReadinessResponse(
            status="ready" if ready else "not_ready",
            ready=ready,
            dependencies=dependencies,
            timestamp=to_iso_string()
        )
