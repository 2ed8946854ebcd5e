from sampurnan.domain.blog.util.di.provider import BlogProvider

__all__ = ["BlogProvider"]
