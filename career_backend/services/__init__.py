"""
Service layer for the Career Recommender backend.

Contains business logic orchestration that:
- Reads the generator's inputs from Supabase (profiles, quiz_responses)
- Persists and reads recommendation sets (career_recommendations)
- Defines the error taxonomy routes map onto HTTP responses

The generator itself lives in recommendation_service and is imported
directly by the routes.
"""

from .errors import (
    DependencyFailureError,
    InvalidRequestError,
    ModelUnavailableError,
    RecommendationError,
)
from .profile_service import get_resume_text
from .quiz_service import get_quiz_answers
from .recommendation_store import list_recommendations, replace_recommendations

__all__ = [
    "RecommendationError",
    "InvalidRequestError",
    "DependencyFailureError",
    "ModelUnavailableError",
    "get_resume_text",
    "get_quiz_answers",
    "list_recommendations",
    "replace_recommendations",
]
