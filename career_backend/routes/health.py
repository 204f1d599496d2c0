"""
Health check route for the Career Recommender backend.

This endpoint is PUBLIC (no authentication required) and provides a simple
status check for load balancers, monitoring, and deployment verification.
It never touches Supabase or the language model.
"""

from fastapi import APIRouter

from career_backend.schemas.health import HealthResponse
from career_backend.utils.logging import get_logger

logger = get_logger(__name__)

# Mounted at root level in main.py
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint (no authentication required). "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "career-recommender-backend"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
