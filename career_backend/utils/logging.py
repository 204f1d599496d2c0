"""
Logging utilities for the Career Recommender backend.

Provides standardized logger configuration following privacy rules.

PRIVACY RULES:
- NEVER log resume text (contains PII)
- NEVER log raw quiz answers
- NEVER log Supabase Auth tokens, API keys, or secrets

Acceptable logging:
- High-level events (e.g., "Generating recommendations", "Using fallback")
- Non-sensitive metadata (e.g., "resume_length=1200", "quiz_answers=12")
- Error codes and sanitized error messages
"""

import logging
from typing import Optional

from career_backend.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from career_backend.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Recommendations stored for job_type=internship")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
