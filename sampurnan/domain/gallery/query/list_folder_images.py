from sampurnan.domain.gallery.port.folder_listing import FolderImage, FolderListing
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.error import ValidationError
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class ListFolderImages(Query):
    folder_id: str | None = None


class FolderImages(Result):
    images: list[FolderImage]


class ListFolderImagesHandler(QueryHandler[ListFolderImages, FolderImages]):
    __auth__ = public()
    folder_listing: FolderListing

    async def run(self, cmd: ListFolderImages) -> FolderImages:
        folder_id = (cmd.folder_id or "").strip()
        if not folder_id:
            raise ValidationError("Folder ID is required", field="folderId")
        return FolderImages(images=await self.folder_listing.list_images(folder_id))
