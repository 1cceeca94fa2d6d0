"""
Health Check Routes - Liveness endpoint.

Used by load balancers and hosting platforms to confirm the service
is up. It does not check Gemini connectivity.
"""
from fastapi import APIRouter

from src.core.config import get_settings
from src.core.logging_config import get_logger
from src.models.envelope import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns 200 with the official email while the service is running.",
)
async def health_check() -> HealthResponse:
    """Perform a basic health check."""
    logger.debug("Health check requested")

    return HealthResponse(
        is_success=True,
        official_email=get_settings().official_email,
    )
