from sampurnan.domain.gallery.util.di.provider import GalleryProvider

__all__ = ["GalleryProvider"]
