"""Detail page image gallery: primary-image selection plus a full-screen viewer."""

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.shared.model.value import ValueObject


def initial_index(images: list[str], thumbnail_url: str) -> int | None:
    """The thumbnail's position if it is one of the images, else the first image."""
    if not images:
        return None
    if thumbnail_url in images:
        return images.index(thumbnail_url)
    return 0


class Gallery(ValueObject):
    images: list[str]
    selected_index: int | None

    @property
    def selected(self) -> str | None:
        if self.selected_index is None:
            return None
        return self.images[self.selected_index]

    @classmethod
    def for_manuscript(cls, manuscript: Manuscript) -> "Gallery":
        images = manuscript.image_urls
        return cls(images=images, selected_index=initial_index(images, manuscript.thumbnail_url))


class GalleryViewer:
    """Selection and viewer state for one gallery.

    Selecting a thumbnail only moves the primary image. Opening the viewer
    starts at the selected image; moving inside the viewer drags the
    background selection along; closing leaves the selection where it is.
    """

    def __init__(self, gallery: Gallery) -> None:
        self._images = gallery.images
        self._selected = gallery.selected_index
        self._viewer_index: int | None = None

    @property
    def selected_index(self) -> int | None:
        return self._selected

    @property
    def selected(self) -> str | None:
        return None if self._selected is None else self._images[self._selected]

    @property
    def is_open(self) -> bool:
        return self._viewer_index is not None

    @property
    def viewer_index(self) -> int | None:
        return self._viewer_index

    def select(self, index: int) -> None:
        self._check(index)
        self._selected = index

    def open_viewer(self) -> None:
        if self._selected is not None:
            self._viewer_index = self._selected

    def view(self, index: int) -> None:
        if not self.is_open:
            raise RuntimeError("viewer is closed")
        self._check(index)
        self._viewer_index = index
        self._selected = index

    def next(self) -> None:
        if self._viewer_index is not None and self._viewer_index < len(self._images) - 1:
            self.view(self._viewer_index + 1)

    def previous(self) -> None:
        if self._viewer_index is not None and self._viewer_index > 0:
            self.view(self._viewer_index - 1)

    def close(self) -> None:
        self._viewer_index = None

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._images):
            raise IndexError(f"image index {index} out of range")
