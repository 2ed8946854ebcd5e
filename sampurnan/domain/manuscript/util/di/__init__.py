from sampurnan.domain.manuscript.util.di.provider import ManuscriptProvider

__all__ = ["ManuscriptProvider"]
