"""
Error taxonomy for the recommendation flow.

- InvalidRequestError: bad caller input. Never retried, surfaced as HTTP 400.
- DependencyFailureError: a Supabase read/write failed. Not retried,
  surfaced as HTTP 500 with the underlying cause in `details`.
- ModelUnavailableError: the language-model path failed (no credential,
  transport error, non-2xx, timeout, unusable output). Never surfaced;
  the generator always resolves it with the rule-based fallback.
"""

from typing import Optional


class RecommendationError(Exception):
    """Base class for recommendation flow errors."""


class InvalidRequestError(RecommendationError):
    """Raised when the caller's input cannot be processed."""


class DependencyFailureError(RecommendationError):
    """Raised when a Supabase table cannot be read or written."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.details = details if details is not None else message


class ModelUnavailableError(RecommendationError):
    """Raised when the language model cannot produce usable recommendations."""
