from sampurnan.domain.story.util.di.provider import StoryProvider

__all__ = ["StoryProvider"]
