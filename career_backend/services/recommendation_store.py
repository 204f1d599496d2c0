"""
Career recommendation persistence.

A user owns at most one recommendation set per job type. Writing a new set
deletes the previous set for that (user_id, job_type) pair and inserts the
new rows; sets for the other job type are left alone.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence, cast

from postgrest.exceptions import APIError
from supabase import Client

from career_backend.schemas.recommendations import CareerRecommendation
from career_backend.services.errors import DependencyFailureError

logger = logging.getLogger(__name__)

TABLE = "career_recommendations"


def _error_message(error: Exception) -> str:
    if isinstance(error, APIError):
        return str(error.message)
    return str(error)


def to_record(
    recommendation: CareerRecommendation,
    user_id: str,
    job_type: str,
    created_at: str,
) -> Dict[str, Any]:
    """Map a recommendation onto a career_recommendations row."""
    return {
        "user_id": user_id,
        "career_title": recommendation.title,
        "match_score": recommendation.match_score,
        "description": recommendation.description,
        "recommended_skills": list(recommendation.skills),
        "reasoning": recommendation.reasoning,
        "job_type": job_type,
        "created_at": created_at,
    }


async def replace_recommendations(
    supabase_client: Client,
    user_id: str,
    job_type: str,
    recommendations: Sequence[CareerRecommendation],
) -> List[Dict[str, Any]]:
    """
    Replace the stored set for (user_id, job_type).

    Args:
        supabase_client: Authenticated Supabase client
        user_id: Owner of the set
        job_type: "full-time" or "internship"
        recommendations: The new set, in ranked order

    Returns:
        The rows that were inserted

    Raises:
        DependencyFailureError: If the delete or the insert fails
    """
    created_at = datetime.now(timezone.utc).isoformat()
    records = [
        to_record(rec, user_id=user_id, job_type=job_type, created_at=created_at)
        for rec in recommendations
    ]

    logger.info(f"Deleting existing recommendations for job_type={job_type}")
    try:
        (
            supabase_client.table(TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("job_type", job_type)
            .execute()
        )
    except Exception as e:
        logger.error(f"Delete error for user {user_id}: {_error_message(e)}")
        raise DependencyFailureError(
            "Failed to store recommendations",
            details=f"Failed to clear previous recommendations: {_error_message(e)}",
        ) from e

    logger.info(f"Inserting {len(records)} recommendations for job_type={job_type}")
    try:
        result = supabase_client.table(TABLE).insert(records).execute()
    except Exception as e:
        logger.error(f"Insert error for user {user_id}: {_error_message(e)}")
        raise DependencyFailureError(
            "Failed to store recommendations",
            details=f"Failed to store recommendations: {_error_message(e)}",
        ) from e

    return cast(List[Dict[str, Any]], result.data or records)


async def list_recommendations(
    supabase_client: Client,
    user_id: str,
    job_type: str,
) -> List[Dict[str, Any]]:
    """
    Fetch the stored set for (user_id, job_type), best match first.

    Raises:
        DependencyFailureError: If the table cannot be read
    """
    try:
        result = (
            supabase_client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("job_type", job_type)
            .order("match_score", desc=True)
            .execute()
        )
    except Exception as e:
        logger.error(f"Recommendations fetch error for user {user_id}: {_error_message(e)}")
        raise DependencyFailureError(
            "Failed to fetch recommendations",
            details=f"Failed to fetch recommendations: {_error_message(e)}",
        ) from e

    return cast(List[Dict[str, Any]], result.data or [])
