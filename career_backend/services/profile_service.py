"""
User profile service.

Reads the resume text that the upload flow stores on the user's profile.
Profiles are 1:1 with auth.users (profiles.id = auth.uid()).
"""

import logging
from typing import Any, Dict, cast

from postgrest.exceptions import APIError
from supabase import Client

from career_backend.services.errors import DependencyFailureError

logger = logging.getLogger(__name__)


async def get_resume_text(
    supabase_client: Client,
    user_id: str
) -> str:
    """
    Fetch the user's extracted resume text.

    A missing profile row or a null resume_text is not an error: both
    mean "no resume uploaded yet" and yield an empty string.

    Args:
        supabase_client: Authenticated Supabase client
        user_id: The authenticated user's ID

    Returns:
        The resume text, or "" when none is stored

    Raises:
        DependencyFailureError: If the profiles table cannot be read
    """
    logger.debug(f"Fetching resume text for user {user_id}")

    try:
        result = (
            supabase_client.table("profiles")
            .select("resume_text")
            .eq("id", user_id)
            .execute()
        )
    except APIError as e:
        logger.error(f"Profile fetch error for user {user_id}: {e.message}")
        raise DependencyFailureError(
            "Failed to fetch profile", details=f"Failed to fetch profile: {e.message}"
        ) from e
    except Exception as e:
        logger.error(f"Profile fetch error for user {user_id}: {e}")
        raise DependencyFailureError(
            "Failed to fetch profile", details=f"Failed to fetch profile: {e}"
        ) from e

    if not result.data:
        logger.info(f"No profile found for user {user_id}, treating resume as empty")
        return ""

    profile: Dict[str, Any] = cast(Dict[str, Any], result.data[0])
    return str(profile.get("resume_text") or "")
