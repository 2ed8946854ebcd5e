from dishka import provide

from sampurnan.domain.story.query.stream_story import StreamStoryHandler
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class StoryProvider(Provider):
    stream_story_handler = provide(StreamStoryHandler, scope=Scope.UOW)
