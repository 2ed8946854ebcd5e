"""Gemini-backed story generation via google-genai streaming."""

import logging
from collections.abc import AsyncIterator

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from sampurnan.config import StoryConfig
from sampurnan.domain.shared.error import ConfigurationError, ExternalServiceError
from sampurnan.domain.story.port.storyteller import Storyteller

logger = logging.getLogger(__name__)

STORY_PROMPT = (
    'You are a creative storyteller. Based on the ancient manuscript titled "{title}" '
    'which is about "{description}", write a short, imaginative story (around 100 words) '
    "that could be inspired by it. Make it engaging for a general audience. "
    "The story should evoke a sense of history, mystery, or wisdom."
)


def build_prompt(title: str, description: str) -> str:
    return STORY_PROMPT.format(title=title, description=description)


class GeminiStoryteller(Storyteller):
    def __init__(self, client: genai.Client, config: StoryConfig) -> None:
        self._client = client
        self._config = config

    @property
    def enabled(self) -> bool:
        return True

    async def stream_story(self, title: str, description: str) -> AsyncIterator[str]:
        generation_config = genai_types.GenerateContentConfig(
            temperature=self._config.temperature,
            top_p=self._config.top_p,
        )
        try:
            stream = await self._client.aio.models.generate_content_stream(
                model=self._config.model,
                contents=build_prompt(title, description),
                config=generation_config,
            )
            async for chunk in stream:
                if chunk.text:
                    yield chunk.text
        except genai_errors.APIError as e:
            logger.warning("Story generation failed: %s", e)
            raise ExternalServiceError(f"Story generation failed: {e.message or e}") from e


class NullStoryteller(Storyteller):
    """Used when no API key is configured; the feature reports itself disabled."""

    @property
    def enabled(self) -> bool:
        return False

    async def stream_story(self, title: str, description: str) -> AsyncIterator[str]:
        raise ConfigurationError("Story generation is disabled: no API key configured")
        yield ""  # pragma: no cover
