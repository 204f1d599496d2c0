"""
Recommendation Service - Career suggestions from resume + quiz answers

This service produces exactly three ranked career recommendations for a
user and job type, then stores them as that user's current set.

Architecture:
- Pattern: Single-shot LLM call with deterministic fallback
- Provider: OpenRouter chat-completions (injected OpenRouterClient)
- Output: Bare JSON array parsed from the completion text, validated
  against the strict CareerRecommendation schema

Flow:
1. Read resume text (profiles) and quiz answers (quiz_responses)
2. Build the prompt
3. Call the model if a client is configured and there is input data
4. Parse, truncate to 3, validate
5. On any model-path failure, use the fixed rule-based triplet
6. Replace the stored set for (user_id, job_type)

Store failures abort the request (DependencyFailureError). Model failures
never do: they are logged and resolved by the fallback, and the caller can
only tell the difference through `source`.
"""

import asyncio
import json
import logging
import re
import weakref
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError
from supabase import Client

from career_backend.agents.career.client import OpenRouterClient
from career_backend.agents.career.fallback import get_fallback_recommendations
from career_backend.agents.career.prompts import build_career_prompt
from career_backend.schemas.recommendations import (
    DEFAULT_JOB_TYPE,
    JOB_TYPES,
    CareerRecommendation,
    RecommendationSource,
)
from career_backend.services.errors import InvalidRequestError, ModelUnavailableError
from career_backend.services.profile_service import get_resume_text
from career_backend.services.quiz_service import get_quiz_answers
from career_backend.services.recommendation_store import replace_recommendations

logger = logging.getLogger(__name__)

RECOMMENDATION_COUNT = 3

# Leading ``` or ```json opener and trailing ``` marker
_FENCE_OPEN_RE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"\n?```$")

# One lock per (user_id, job_type); the delete+insert of two generations
# for the same set must not interleave. Entries go away once no generation
# holds or waits on the lock.
_generation_locks: "weakref.WeakValueDictionary[Tuple[str, str], asyncio.Lock]" = (
    weakref.WeakValueDictionary()
)


@dataclass
class GenerationResult:
    """Outcome of one generation cycle."""
    recommendations: List[CareerRecommendation]
    source: RecommendationSource
    job_type: str


def _get_generation_lock(user_id: str, job_type: str) -> asyncio.Lock:
    key = (user_id, job_type)
    lock = _generation_locks.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _generation_locks[key] = lock
    return lock


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence wrapping the whole response, if any."""
    cleaned = text.strip()
    cleaned = _FENCE_OPEN_RE.sub("", cleaned, count=1)
    cleaned = _FENCE_CLOSE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_model_recommendations(raw_text: str) -> List[CareerRecommendation]:
    """
    Turn the model's completion text into exactly 3 recommendations.

    The text must be (optionally fenced) JSON holding a non-empty array.
    Only the first 3 entries are kept, in order, and each of them must
    satisfy CareerRecommendation. Fewer than 3 entries is rejected rather
    than padded.

    Raises:
        ModelUnavailableError: If the text is unusable for any reason.
    """
    cleaned = strip_code_fence(raw_text)

    try:
        parsed: Any = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ModelUnavailableError(f"Model response is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise ModelUnavailableError(
            f"Model response is a {type(parsed).__name__}, expected an array"
        )

    if not parsed:
        raise ModelUnavailableError("Model response is an empty array")

    kept = parsed[:RECOMMENDATION_COUNT]
    if len(kept) < RECOMMENDATION_COUNT:
        raise ModelUnavailableError(
            f"Model returned {len(kept)} recommendations, expected {RECOMMENDATION_COUNT}"
        )

    recommendations: List[CareerRecommendation] = []
    for idx, entry in enumerate(kept):
        try:
            recommendations.append(CareerRecommendation.model_validate(entry))
        except ValidationError as e:
            raise ModelUnavailableError(
                f"Recommendation {idx} failed validation: {e.error_count()} error(s)"
            ) from e

    return recommendations


class CareerRecommendationGenerator:
    """
    Generates and stores a user's career recommendation set.

    Args:
        supabase_client: Authenticated Supabase client used for all reads
                         and writes
        model_client: OpenRouter client, or None when no credential is
                      configured (every generation is then rule-based)
    """

    def __init__(
        self,
        supabase_client: Client,
        model_client: Optional[OpenRouterClient] = None,
    ):
        self._supabase = supabase_client
        self._model_client = model_client

    async def generate(
        self,
        user_id: str,
        job_type: str = DEFAULT_JOB_TYPE,
    ) -> GenerationResult:
        """
        Generate, store and return the recommendation set.

        Raises:
            InvalidRequestError: If user_id is missing or job_type is unknown
            DependencyFailureError: If a Supabase read or write fails
        """
        if not user_id or not str(user_id).strip():
            raise InvalidRequestError("Missing userId")
        if job_type not in JOB_TYPES:
            raise InvalidRequestError(f"Unsupported jobType: {job_type}")

        logger.info(f"Generating recommendations for user {user_id}, job_type={job_type}")

        lock = _get_generation_lock(user_id, job_type)
        async with lock:
            resume_text = await get_resume_text(self._supabase, user_id)
            quiz_answers = await get_quiz_answers(self._supabase, user_id)

            logger.info(
                f"Resume text length: {len(resume_text)}, "
                f"quiz answers count: {len(quiz_answers)}"
            )

            recommendations = await self._recommend_with_model(
                resume_text, quiz_answers, job_type
            )
            source: RecommendationSource = "ai_generated"

            if recommendations is None:
                logger.info(f"Using rule-based recommendations for job_type={job_type}")
                recommendations = get_fallback_recommendations(job_type)
                source = "rule_based"

            await replace_recommendations(
                self._supabase,
                user_id=user_id,
                job_type=job_type,
                recommendations=recommendations,
            )

        logger.info(
            f"Stored {len(recommendations)} recommendations for user {user_id} "
            f"(source={source})"
        )

        return GenerationResult(
            recommendations=recommendations,
            source=source,
            job_type=job_type,
        )

    async def _recommend_with_model(
        self,
        resume_text: str,
        quiz_answers: List[Dict[str, Any]],
        job_type: str,
    ) -> Optional[List[CareerRecommendation]]:
        """Return model recommendations, or None when the fallback applies."""
        if self._model_client is None:
            logger.info("Skipping AI generation - OpenRouter API key not configured")
            return None

        if not resume_text and not quiz_answers:
            logger.info("Skipping AI generation - no resume or quiz data")
            return None

        prompt = build_career_prompt(resume_text, quiz_answers, job_type)

        try:
            raw_text = await self._model_client.complete(prompt)
            recommendations = parse_model_recommendations(raw_text)
        except ModelUnavailableError as e:
            logger.error(f"AI recommendation path failed: {e}")
            return None

        logger.info(f"Successfully parsed {len(recommendations)} AI recommendations")
        return recommendations
