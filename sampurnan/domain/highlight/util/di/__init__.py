from sampurnan.domain.highlight.util.di.provider import HighlightProvider

__all__ = ["HighlightProvider"]
