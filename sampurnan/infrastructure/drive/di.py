"""DI provider for the Drive folder-listing adapter."""

from typing import AsyncIterable, NewType

import httpx
from dishka import provide

from sampurnan.config import Config
from sampurnan.domain.gallery.port.folder_listing import FolderListing
from sampurnan.infrastructure.drive.folder_lister import DriveFolderLister
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope

DriveHttpClient = NewType("DriveHttpClient", httpx.AsyncClient)

_DRIVE_TIMEOUT = httpx.Timeout(
    connect=5.0,
    read=15.0,
    write=5.0,
    pool=5.0,
)


class DriveProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_drive_http_client(self) -> AsyncIterable[DriveHttpClient]:
        async with httpx.AsyncClient(timeout=_DRIVE_TIMEOUT) as client:
            yield DriveHttpClient(client)

    @provide(scope=Scope.APP, provides=FolderListing)
    def get_folder_lister(self, client: DriveHttpClient, config: Config) -> DriveFolderLister:
        return DriveFolderLister(client=client, config=config.drive)
