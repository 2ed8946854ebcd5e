from abc import abstractmethod
from typing import Protocol

from sampurnan.domain.shared.model.value import ValueObject
from sampurnan.domain.shared.port import Port


class FolderImage(ValueObject):
    id: str
    name: str
    url: str | None = None
    thumbnail: str | None = None


class FolderListing(Port, Protocol):
    """Lists the images inside a remote shared folder, ordered by name."""

    @abstractmethod
    async def list_images(self, folder_id: str) -> list[FolderImage]: ...
