"""Health check endpoints."""

from fastapi import APIRouter

from routeparams.config import settings
from routeparams.schemas.common import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check - always returns 200 if app is running."""
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        environment=settings.app_env,
    )
