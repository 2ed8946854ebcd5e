"""Unit tests for the detail-page gallery and its full-screen viewer."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.gallery import Gallery, GalleryViewer, initial_index
from sampurnan.domain.manuscript.model.value import ManuscriptId

IMAGES = ["p1.jpg", "p2.jpg", "p3.jpg", "p4.jpg"]


class TestInitialIndex:
    def test_thumbnail_among_images(self):
        assert initial_index(IMAGES, "p3.jpg") == 2

    def test_thumbnail_not_among_images_falls_back_to_first(self):
        assert initial_index(IMAGES, "cover.jpg") == 0

    def test_no_images(self):
        assert initial_index([], "cover.jpg") is None


def test_gallery_for_manuscript():
    manuscript = Manuscript(
        id=ManuscriptId(uuid4()),
        created_at=datetime.now(UTC),
        metadata={"title": "Serat", "image_urls": IMAGES, "thumbnail_url": "p2.jpg"},
    )

    gallery = Gallery.for_manuscript(manuscript)

    assert gallery.selected_index == 1
    assert gallery.selected == "p2.jpg"


class TestGalleryViewer:
    @pytest.fixture
    def viewer(self) -> GalleryViewer:
        return GalleryViewer(Gallery(images=IMAGES, selected_index=0))

    def test_select_moves_primary_image_only(self, viewer):
        viewer.select(2)
        assert viewer.selected == "p3.jpg"
        assert not viewer.is_open

    def test_open_starts_at_selection(self, viewer):
        viewer.select(1)
        viewer.open_viewer()
        assert viewer.viewer_index == 1

    def test_moving_in_viewer_drags_selection(self, viewer):
        viewer.open_viewer()
        viewer.next()
        viewer.next()
        assert viewer.viewer_index == 2
        assert viewer.selected_index == 2

    def test_next_stops_at_last_image(self, viewer):
        viewer.select(3)
        viewer.open_viewer()
        viewer.next()
        assert viewer.viewer_index == 3

    def test_previous_stops_at_first_image(self, viewer):
        viewer.open_viewer()
        viewer.previous()
        assert viewer.viewer_index == 0

    def test_close_keeps_selection(self, viewer):
        viewer.open_viewer()
        viewer.view(3)
        viewer.close()
        assert not viewer.is_open
        assert viewer.selected == "p4.jpg"

    def test_view_requires_open_viewer(self, viewer):
        with pytest.raises(RuntimeError):
            viewer.view(1)

    def test_out_of_range_index(self, viewer):
        with pytest.raises(IndexError):
            viewer.select(4)

    def test_empty_gallery_never_opens(self):
        viewer = GalleryViewer(Gallery(images=[], selected_index=None))
        viewer.open_viewer()
        assert not viewer.is_open
        assert viewer.selected is None
