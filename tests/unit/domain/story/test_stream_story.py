"""Unit tests for the story streaming query."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.value import ManuscriptId
from sampurnan.domain.shared.error import ConfigurationError, ExternalServiceError
from sampurnan.domain.story.query.stream_story import StreamStory, StreamStoryHandler


def make_storyteller(chunks=None, error=None, enabled=True):
    async def stream_story(title, description):
        if error is not None:
            raise error
        for chunk in chunks or []:
            yield chunk

    storyteller = MagicMock()
    storyteller.enabled = enabled
    storyteller.stream_story = stream_story
    return storyteller


@pytest.fixture
def manuscript_service():
    service = AsyncMock()
    service.get.return_value = Manuscript(
        id=ManuscriptId(uuid4()),
        created_at=datetime.now(UTC),
        metadata={"title": "Serat Centhini", "description": "Ensiklopedia Jawa"},
    )
    return service


async def collect(stream) -> list[str]:
    return [chunk async for chunk in stream]


class TestStreamStoryHandler:
    async def test_streams_every_chunk_in_order(self, manuscript_service):
        handler = StreamStoryHandler(
            manuscript_service=manuscript_service,
            storyteller=make_storyteller(["Pada ", "suatu ", "hari"]),
        )

        result = await handler.run(StreamStory(id=ManuscriptId(uuid4())))

        assert result.title == "Serat Centhini"
        assert await collect(result.stream) == ["Pada ", "suatu ", "hari"]

    async def test_upstream_failure_surfaces_before_streaming(self, manuscript_service):
        handler = StreamStoryHandler(
            manuscript_service=manuscript_service,
            storyteller=make_storyteller(error=ExternalServiceError("Story generation failed: quota")),
        )

        with pytest.raises(ExternalServiceError):
            await handler.run(StreamStory(id=ManuscriptId(uuid4())))

    async def test_disabled_storyteller(self, manuscript_service):
        handler = StreamStoryHandler(
            manuscript_service=manuscript_service,
            storyteller=make_storyteller(enabled=False),
        )

        with pytest.raises(ConfigurationError):
            await handler.run(StreamStory(id=ManuscriptId(uuid4())))
        manuscript_service.get.assert_not_awaited()
