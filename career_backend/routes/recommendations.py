"""
FastAPI routes for career recommendation endpoints.

All endpoints require authentication via Supabase Auth.

Endpoints:
- POST /recommendations/generate: Generate and store a fresh set
- GET /recommendations: Read the stored set for a job type
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from career_backend.agents.career.client import get_model_client
from career_backend.auth.dependencies import (
    AuthenticatedUser,
    ensure_same_user,
    get_authenticated_user,
)
from career_backend.db.client import get_supabase_client
from career_backend.schemas.recommendations import (
    DEFAULT_JOB_TYPE,
    ErrorResponse,
    GenerateRecommendationsRequest,
    GenerateRecommendationsResponse,
    JobType,
    RecommendationListResponse,
    StoredRecommendation,
)
from career_backend.services.errors import DependencyFailureError, InvalidRequestError
from career_backend.services.recommendation_service import CareerRecommendationGenerator
from career_backend.services.recommendation_store import list_recommendations

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)

GENERATION_FAILED = "Failed to generate career recommendations"


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/generate",
    response_model=GenerateRecommendationsResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Generate career recommendations",
    description="""
    Generates exactly 3 career recommendations from the user's resume text
    and quiz answers, replacing any stored set for the same job type.

    **Authentication:** Required (Bearer token). `userId` must match the token.

    **Behavior:**
    - Calls the language model when a key is configured and the user has
      a resume or quiz answers
    - Falls back to a fixed rule-based set otherwise, or when the model
      fails or returns unusable output (`source = rule_based`)
    - Store failures return 500 with details
    """
)
async def generate_recommendations_endpoint(
    request: GenerateRecommendationsRequest,
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)]
):
    """
    Auth
    - get_authenticated_user verifies the token; ensure_same_user checks ownership

    Parse/Validate Request
    - Pydantic GenerateRecommendationsRequest (missing userId → 400)

    Call Service
    - CareerRecommendationGenerator.generate() reads, calls the model,
      falls back and persists

    Map Output -> ResponseModel
    - GenerateRecommendationsResponse with source and jobType
    """
    logger.info(
        f"POST /recommendations/generate called by user_id={auth_user.user_id}, "
        f"job_type={request.job_type}"
    )

    ensure_same_user(auth_user, request.user_id)

    supabase_client = get_supabase_client(auth_user.access_token)
    generator = CareerRecommendationGenerator(
        supabase_client=supabase_client,
        model_client=get_model_client(),
    )

    try:
        result = await generator.generate(
            user_id=request.user_id,
            job_type=request.job_type,
        )
    except InvalidRequestError as e:
        return _error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except DependencyFailureError as e:
        logger.error(f"Error generating recommendations: {e.details}")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, GENERATION_FAILED, e.details
        )
    except Exception as e:
        logger.error(f"Error generating recommendations: {e}", exc_info=True)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, GENERATION_FAILED, str(e)
        )

    logger.info(f"Returning {len(result.recommendations)} recommendations (source={result.source})")

    return GenerateRecommendationsResponse(
        recommendations=result.recommendations,
        message=f"{result.job_type} career recommendations generated successfully",
        source=result.source,
        job_type=result.job_type,
    )


@router.get(
    "",
    response_model=RecommendationListResponse,
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
    summary="Get stored career recommendations",
    description="""
    Returns the authenticated user's stored recommendations for one job
    type, best match first.

    **Authentication:** Required (Bearer token)
    """
)
async def get_recommendations_endpoint(
    auth_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    job_type: Annotated[JobType, Query(alias="jobType")] = DEFAULT_JOB_TYPE,
):
    logger.info(
        f"GET /recommendations called by user_id={auth_user.user_id}, job_type={job_type}"
    )

    supabase_client = get_supabase_client(auth_user.access_token)

    try:
        rows = await list_recommendations(
            supabase_client,
            user_id=auth_user.user_id,
            job_type=job_type,
        )
    except DependencyFailureError as e:
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch career recommendations",
            e.details,
        )

    return RecommendationListResponse(
        recommendations=[StoredRecommendation.model_validate(row) for row in rows],
        job_type=job_type,
    )
