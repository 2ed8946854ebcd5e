from dishka import provide

from sampurnan.config import Config
from sampurnan.domain.highlight.query.get_highlights import GetHighlightsHandler, HighlightCounts
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class HighlightProvider(Provider):
    @provide(scope=Scope.APP)
    def get_highlight_counts(self, config: Config) -> HighlightCounts:
        return HighlightCounts(
            manuscripts=config.catalog.highlight_manuscripts,
            articles=config.catalog.highlight_articles,
            entries=config.catalog.highlight_entries,
        )

    get_highlights_handler = provide(GetHighlightsHandler, scope=Scope.UOW)
