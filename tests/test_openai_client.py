import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from openai.types import CompletionUsage

from astrosolar.domain.errors import ProviderError, ProviderUnavailable
from astrosolar.domain.models import ChatRequest
from astrosolar.infra.clients.openai_client import OpenAIChatClient

COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


def make_request():
    return ChatRequest(
        model="gpt-3.5-turbo",
        messages=[{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}],
        max_tokens=500,
        temperature=0.7,
    )


def make_completion(content="Hello!", usage=None):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=usage,
    )


@pytest.fixture
def chat_client(settings):
    client = OpenAIChatClient(settings)
    client.client = MagicMock()
    return client


def test_sdk_client_is_built_without_retries(settings):
    client = OpenAIChatClient(settings)
    assert client.client.max_retries == 0
    assert client.client.timeout == settings.openai_timeout


def test_success_maps_message_and_usage(chat_client):
    usage = CompletionUsage(prompt_tokens=10, completion_tokens=5, total_tokens=15)
    chat_client.client.chat.completions.create = AsyncMock(return_value=make_completion("Hi there", usage))

    result = asyncio.run(chat_client.get_chat_completion(make_request()))

    assert result.message == "Hi there"
    assert result.usage["total_tokens"] == 15
    kwargs = chat_client.client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "gpt-3.5-turbo"
    assert kwargs["max_tokens"] == 500
    assert kwargs["temperature"] == 0.7
    assert len(kwargs["messages"]) == 2


def test_missing_usage_is_none(chat_client):
    chat_client.client.chat.completions.create = AsyncMock(return_value=make_completion(usage=None))
    result = asyncio.run(chat_client.get_chat_completion(make_request()))
    assert result.usage is None


def test_status_error_keeps_upstream_code(chat_client):
    response = httpx.Response(429, request=httpx.Request("POST", COMPLETIONS_URL))
    error = openai.RateLimitError(
        "Rate limit reached", response=response, body={"error": {"message": "org-secret quota exceeded"}}
    )
    chat_client.client.chat.completions.create = AsyncMock(side_effect=error)

    with pytest.raises(ProviderError) as exc:
        asyncio.run(chat_client.get_chat_completion(make_request()))

    assert exc.value.status_code == 429
    assert "org-secret" not in exc.value.message


def test_timeout_is_provider_unavailable(chat_client):
    error = openai.APITimeoutError(request=httpx.Request("POST", COMPLETIONS_URL))
    chat_client.client.chat.completions.create = AsyncMock(side_effect=error)

    with pytest.raises(ProviderUnavailable) as exc:
        asyncio.run(chat_client.get_chat_completion(make_request()))
    assert exc.value.status_code == 503


def test_connection_error_is_provider_unavailable(chat_client):
    error = openai.APIConnectionError(request=httpx.Request("POST", COMPLETIONS_URL))
    chat_client.client.chat.completions.create = AsyncMock(side_effect=error)

    with pytest.raises(ProviderUnavailable):
        asyncio.run(chat_client.get_chat_completion(make_request()))
