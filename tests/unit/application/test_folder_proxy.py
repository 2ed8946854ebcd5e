"""Tests for the folder-listing proxy route and its CORS behaviour."""

import pytest
from dishka import make_async_container, provide
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sampurnan.application.api.v1.routes import folders
from sampurnan.domain.gallery.port.folder_listing import FolderImage, FolderListing
from sampurnan.domain.gallery.query.list_folder_images import ListFolderImagesHandler
from sampurnan.domain.shared.error import ExternalServiceError
from sampurnan.util.di.base import Provider
from sampurnan.util.di.fastapi import setup_dishka
from sampurnan.util.di.scope import Scope


class FakeFolderListing(FolderListing):
    def __init__(self, images=None, error=None):
        self.images = images or []
        self.error = error
        self.requested: list[str] = []

    async def list_images(self, folder_id: str) -> list[FolderImage]:
        self.requested.append(folder_id)
        if self.error is not None:
            raise self.error
        return self.images


def build_client(listing: FakeFolderListing) -> TestClient:
    class TestProvider(Provider):
        @provide(scope=Scope.APP)
        def get_folder_listing(self) -> FolderListing:
            return listing

        handler = provide(ListFolderImagesHandler, scope=Scope.UOW)

    app = FastAPI()
    setup_dishka(make_async_container(TestProvider(), scopes=Scope), app)
    app.include_router(folders.router, prefix="/api/v1")
    return TestClient(app)


URL = "/api/v1/folders/images"


@pytest.fixture
def listing() -> FakeFolderListing:
    return FakeFolderListing(images=[FolderImage(id="f1", name="001.jpg", url="u1", thumbnail="t1")])


class TestFolderProxy:
    def test_preflight_is_always_answered(self, listing):
        response = build_client(listing).options(URL)

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert "content-type" in response.headers["access-control-allow-headers"]
        assert listing.requested == []

    def test_lists_images(self, listing):
        response = build_client(listing).post(URL, json={"folderId": "abc"})

        assert response.status_code == 200
        assert response.json() == {"images": [{"id": "f1", "name": "001.jpg", "url": "u1", "thumbnail": "t1"}]}
        assert response.headers["access-control-allow-origin"] == "*"
        assert listing.requested == ["abc"]

    def test_missing_folder_id(self, listing):
        response = build_client(listing).post(URL, json={})

        assert response.status_code == 500
        assert response.json() == {"error": "Folder ID is required"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_body_that_is_not_json(self, listing):
        response = build_client(listing).post(URL, content=b"folderId=abc")

        assert response.status_code == 500
        assert response.json() == {"error": "Folder ID is required"}

    def test_upstream_failure(self):
        listing = FakeFolderListing(error=ExternalServiceError("Google Drive API error: API key not valid"))

        response = build_client(listing).post(URL, json={"folderId": "abc"})

        assert response.status_code == 500
        assert response.json() == {"error": "Google Drive API error: API key not valid"}
        assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
