"""
Career Recommendation - Single-Shot LLM Architecture

This package contains the prompt templates, the OpenRouter client and the
rule-based fallback sets used by the career recommendation generator.

The orchestration layer is in:
- career_backend/services/recommendation_service.py
"""

from career_backend.agents.career.client import OpenRouterClient, get_model_client
from career_backend.agents.career.fallback import (
    FALLBACK_RECOMMENDATIONS,
    get_fallback_recommendations,
)
from career_backend.agents.career.prompts import (
    CAREER_SYSTEM_PROMPT,
    build_career_prompt,
    format_quiz_answers,
)

__all__ = [
    "OpenRouterClient",
    "get_model_client",
    "FALLBACK_RECOMMENDATIONS",
    "get_fallback_recommendations",
    "CAREER_SYSTEM_PROMPT",
    "build_career_prompt",
    "format_quiz_answers",
]
