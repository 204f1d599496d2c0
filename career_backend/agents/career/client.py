"""
OpenRouter chat-completion client.

Wraps a single bearer-authenticated POST to {base_url}/chat/completions and
returns the first completion's message content. Every failure mode
(missing key, transport error, timeout, non-2xx, unexpected body) is raised
as ModelUnavailableError so the generator can fall back.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from career_backend.agents.career.prompts import CAREER_SYSTEM_PROMPT
from career_backend.config import settings
from career_backend.services.errors import ModelUnavailableError

logger = logging.getLogger(__name__)

APP_TITLE = "Career Recommender App"
DEFAULT_TEMPERATURE = 0.7

# Lazily built from settings
_model_client: Optional["OpenRouterClient"] = None


class OpenRouterClient:
    """Async client for the OpenRouter chat-completions endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://openrouter.ai/api/v1",
        timeout_s: float = 30.0,
        temperature: float = DEFAULT_TEMPERATURE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ModelUnavailableError("OpenRouter API key not set")

        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    def _build_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self._model,
            "messages": [
                {"role": "system", "content": CAREER_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self._temperature,
        }

    async def complete(self, prompt: str) -> str:
        """
        Send the prompt and return the completion text.

        Raises:
            ModelUnavailableError: On any transport, HTTP or shape failure.
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "X-Title": APP_TITLE,
        }

        logger.info(f"Calling OpenRouter model={self._model}")

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_s, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self._base_url}/chat/completions",
                    headers=headers,
                    json=self._build_body(prompt),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise ModelUnavailableError(
                f"OpenRouter request timed out after {self._timeout_s}s"
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"OpenRouter API error body: {e.response.text[:500]}")
            raise ModelUnavailableError(f"OpenRouter API error: {status_code}") from e
        except httpx.HTTPError as e:
            raise ModelUnavailableError(f"OpenRouter request failed: {e}") from e
        except ValueError as e:
            # response.json() on a non-JSON body
            raise ModelUnavailableError("OpenRouter returned a non-JSON body") from e

        logger.info(f"OpenRouter API response status: {response.status_code}")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ModelUnavailableError("OpenRouter response has no completion") from e

        if not isinstance(content, str) or not content.strip():
            raise ModelUnavailableError("OpenRouter returned an empty completion")

        return content


def get_model_client() -> Optional[OpenRouterClient]:
    """
    Lazy initialization of the OpenRouter client from settings.

    Returns None when OPENROUTER_API_KEY is not configured, which the
    generator treats as "use the rule-based recommendations".
    """
    global _model_client

    if _model_client is not None:
        return _model_client

    if not settings.OPENROUTER_API_KEY:
        logger.warning(
            "OPENROUTER_API_KEY not configured. Career recommendations will "
            "use the rule-based fallback."
        )
        return None

    _model_client = OpenRouterClient(
        api_key=settings.OPENROUTER_API_KEY,
        model=settings.OPENROUTER_MODEL,
        base_url=settings.OPENROUTER_BASE_URL,
        timeout_s=settings.OPENROUTER_TIMEOUT_S,
    )
    logger.info("OpenRouter client initialized for career recommendations")
    return _model_client
