from dishka import provide

from sampurnan.domain.gallery.query.list_folder_images import ListFolderImagesHandler
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class GalleryProvider(Provider):
    list_folder_images_handler = provide(ListFolderImagesHandler, scope=Scope.UOW)
