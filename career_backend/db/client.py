"""
Supabase client factory with RLS enforcement.

Clients are created per request with the caller's JWT so that Row Level
Security scopes every query on profiles, quiz_responses and
career_recommendations to user_id = auth.uid().

Rules:
1. NEVER use the service_role key for user-initiated generation
2. ALWAYS use the user's JWT token from Supabase Auth
3. The client MUST be created per-request with the user's token
"""

import logging

from career_backend.config import settings
from supabase import Client, create_client

logger = logging.getLogger(__name__)


def get_supabase_client(access_token: str) -> Client:
    """
    Create an authenticated Supabase client for a specific user.

    Args:
        access_token: The user's JWT access token from Supabase Auth,
                      as verified in career_backend/auth/dependencies.py.

    Returns:
        An authenticated Supabase client that enforces RLS.

    Example:
        >>> client = get_supabase_client(auth_user.access_token)
        >>> client.table("quiz_responses").select("*").execute()
    """
    client: Client = create_client(
        supabase_url=settings.SUPABASE_URL,
        supabase_key=settings.SUPABASE_PUBLISHABLE_KEY
    )

    # The token's 'sub' claim is what auth.uid() resolves to in RLS policies
    client.auth.set_session(access_token, access_token)

    logger.debug(
        "Created authenticated Supabase client with user token "
        "(RLS enforced)"
    )

    return client
