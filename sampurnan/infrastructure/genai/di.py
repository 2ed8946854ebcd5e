from dishka import provide
from google import genai

from sampurnan.config import Config
from sampurnan.domain.story.port.storyteller import Storyteller
from sampurnan.infrastructure.genai.storyteller import GeminiStoryteller, NullStoryteller
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class GenAIProvider(Provider):
    @provide(scope=Scope.APP)
    def get_storyteller(self, config: Config) -> Storyteller:
        if not config.story.api_key:
            return NullStoryteller()
        return GeminiStoryteller(client=genai.Client(api_key=config.story.api_key), config=config.story)
