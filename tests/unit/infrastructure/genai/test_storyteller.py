"""Unit tests for the Gemini storyteller adapter."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import errors as genai_errors

from sampurnan.config import StoryConfig
from sampurnan.domain.shared.error import ConfigurationError, ExternalServiceError
from sampurnan.infrastructure.genai.storyteller import GeminiStoryteller, NullStoryteller, build_prompt


def client_streaming(*texts):
    async def stream():
        for text in texts:
            yield SimpleNamespace(text=text)

    client = MagicMock()
    client.aio.models.generate_content_stream = AsyncMock(return_value=stream())
    return client


def test_prompt_names_title_and_description():
    prompt = build_prompt("Serat Centhini", "perjalanan spiritual")
    assert '"Serat Centhini"' in prompt
    assert '"perjalanan spiritual"' in prompt
    assert "around 100 words" in prompt


class TestGeminiStoryteller:
    async def test_yields_text_chunks(self):
        client = client_streaming("Pada suatu ", None, "hari.")
        storyteller = GeminiStoryteller(client=client, config=StoryConfig(api_key="k"))

        chunks = [c async for c in storyteller.stream_story("Serat", "desc")]

        assert chunks == ["Pada suatu ", "hari."]
        kwargs = client.aio.models.generate_content_stream.await_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == build_prompt("Serat", "desc")
        assert kwargs["config"].temperature == 0.8
        assert kwargs["config"].top_p == 0.95

    async def test_api_error_becomes_external_service_error(self):
        client = MagicMock()
        client.aio.models.generate_content_stream = AsyncMock(
            side_effect=genai_errors.ClientError(
                429, {"error": {"code": 429, "message": "Quota exceeded", "status": "RESOURCE_EXHAUSTED"}}
            )
        )
        storyteller = GeminiStoryteller(client=client, config=StoryConfig(api_key="k"))

        with pytest.raises(ExternalServiceError, match="Story generation failed"):
            [c async for c in storyteller.stream_story("Serat", "desc")]


class TestNullStoryteller:
    async def test_is_disabled(self):
        storyteller = NullStoryteller()

        assert storyteller.enabled is False
        with pytest.raises(ConfigurationError):
            [c async for c in storyteller.stream_story("Serat", "desc")]
