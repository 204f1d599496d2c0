"""
Quiz response service.

Reads the answers stored by the career and personality quizzes.
"""

import logging
from typing import Any, Dict, List, cast

from postgrest.exceptions import APIError
from supabase import Client

from career_backend.services.errors import DependencyFailureError

logger = logging.getLogger(__name__)


async def get_quiz_answers(
    supabase_client: Client,
    user_id: str
) -> List[Dict[str, Any]]:
    """
    Fetch all quiz answers for a user.

    Returns:
        Rows with question_id, answer (raw, possibly JSON-encoded) and score.
        An empty list when the user has not taken a quiz.

    Raises:
        DependencyFailureError: If the quiz_responses table cannot be read
    """
    try:
        result = (
            supabase_client.table("quiz_responses")
            .select("question_id, answer, score")
            .eq("user_id", user_id)
            .execute()
        )
    except APIError as e:
        logger.error(f"Quiz responses fetch error for user {user_id}: {e.message}")
        raise DependencyFailureError(
            "Failed to fetch quiz responses",
            details=f"Failed to fetch quiz responses: {e.message}",
        ) from e
    except Exception as e:
        logger.error(f"Quiz responses fetch error for user {user_id}: {e}")
        raise DependencyFailureError(
            "Failed to fetch quiz responses",
            details=f"Failed to fetch quiz responses: {e}",
        ) from e

    answers = cast(List[Dict[str, Any]], result.data or [])
    logger.debug(f"Fetched {len(answers)} quiz answers for user {user_id}")
    return answers
