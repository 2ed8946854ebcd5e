from collections.abc import AsyncIterator

from sampurnan.domain.manuscript.model.value import ManuscriptId
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.error import ConfigurationError
from sampurnan.domain.shared.query import Query, QueryHandler, Result
from sampurnan.domain.story.port.storyteller import Storyteller


class StreamStory(Query):
    id: ManuscriptId


class StoryStream(Result, arbitrary_types_allowed=True):
    title: str
    stream: AsyncIterator  # str chunks; checked with isinstance only


async def _prepend(first: str, rest: AsyncIterator[str]) -> AsyncIterator[str]:
    yield first
    async for chunk in rest:
        yield chunk


class StreamStoryHandler(QueryHandler[StreamStory, StoryStream]):
    __auth__ = public()
    manuscript_service: ManuscriptService
    storyteller: Storyteller

    async def run(self, cmd: StreamStory) -> StoryStream:
        if not self.storyteller.enabled:
            raise ConfigurationError("Story generation is disabled: no API key configured")

        manuscript = await self.manuscript_service.get(cmd.id)
        chunks = aiter(self.storyteller.stream_story(manuscript.title, manuscript.description))
        # Pull the first chunk here so upstream failures surface before the response starts.
        first = await anext(chunks, "")
        return StoryStream(title=manuscript.title, stream=_prepend(first, chunks))
