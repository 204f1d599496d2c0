"""
Tests for the OpenRouter chat-completion client.

HTTP traffic is served by httpx.MockTransport, so no network is used.
"""

import json
from unittest.mock import patch

import httpx
import pytest

from career_backend.agents.career import client as client_module
from career_backend.agents.career.client import OpenRouterClient, get_model_client
from career_backend.agents.career.prompts import CAREER_SYSTEM_PROMPT
from career_backend.services.errors import ModelUnavailableError


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _client(handler, **kwargs) -> OpenRouterClient:
    return OpenRouterClient(
        api_key="sk-or-test",
        model="test/model",
        base_url="https://openrouter.test/api/v1/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestOpenRouterClient:

    @pytest.mark.asyncio
    async def test_posts_chat_completion_request(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(200, json=_completion("[]"))

        content = await _client(handler).complete("Suggest careers")

        request = captured["request"]
        body = json.loads(request.content)
        assert content == "[]"
        assert request.method == "POST"
        assert str(request.url) == "https://openrouter.test/api/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer sk-or-test"
        assert request.headers["X-Title"] == "Career Recommender App"
        assert body["model"] == "test/model"
        assert body["messages"] == [
            {"role": "system", "content": CAREER_SYSTEM_PROMPT},
            {"role": "user", "content": "Suggest careers"},
        ]
        assert body["temperature"] == 0.7

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 429, 500, 502])
    async def test_non_2xx_raises_model_unavailable(self, status_code):
        def handler(request):
            return httpx.Response(status_code, text="upstream says no")

        with pytest.raises(ModelUnavailableError, match=str(status_code)):
            await _client(handler).complete("prompt")

    @pytest.mark.asyncio
    async def test_timeout_raises_model_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ModelUnavailableError, match="timed out"):
            await _client(handler, timeout_s=0.5).complete("prompt")

    @pytest.mark.asyncio
    async def test_connection_error_raises_model_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ModelUnavailableError):
            await _client(handler).complete("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"choices": []},
        {"error": {"message": "model overloaded"}},
        _completion(None),
        _completion("   "),
    ])
    async def test_unexpected_body_raises_model_unavailable(self, payload):
        def handler(request):
            return httpx.Response(200, json=payload)

        with pytest.raises(ModelUnavailableError):
            await _client(handler).complete("prompt")

    @pytest.mark.asyncio
    async def test_non_json_body_raises_model_unavailable(self):
        def handler(request):
            return httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(ModelUnavailableError):
            await _client(handler).complete("prompt")

    def test_empty_api_key_rejected(self):
        with pytest.raises(ModelUnavailableError):
            OpenRouterClient(api_key="", model="test/model")


class TestGetModelClient:

    def test_returns_none_without_key(self):
        with patch.object(client_module, "_model_client", None), \
                patch.object(client_module.settings, "OPENROUTER_API_KEY", ""):
            assert get_model_client() is None

    def test_builds_client_from_settings(self):
        with patch.object(client_module, "_model_client", None), \
                patch.object(client_module.settings, "OPENROUTER_API_KEY", "sk-or-live"), \
                patch.object(client_module.settings, "OPENROUTER_MODEL", "vendor/model"):
            model_client = get_model_client()
            assert isinstance(model_client, OpenRouterClient)
            assert model_client.model == "vendor/model"
            assert get_model_client() is model_client
