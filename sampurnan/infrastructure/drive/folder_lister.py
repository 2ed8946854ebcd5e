"""Google Drive v3 adapter for the FolderListing port."""

import logging

import httpx

from sampurnan.config import DriveConfig
from sampurnan.domain.gallery.port.folder_listing import FolderImage, FolderListing
from sampurnan.domain.shared.error import ConfigurationError, ExternalServiceError

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/gif")
FILE_FIELDS = "files(id, name, webContentLink, thumbnailLink)"


def folder_query(folder_id: str) -> str:
    mime_clause = " or ".join(f"mimeType='{mime}'" for mime in IMAGE_MIME_TYPES)
    return f"'{folder_id}' in parents and ({mime_clause})"


def _upstream_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.text or response.reason_phrase


class DriveFolderLister(FolderListing):
    """Lists jpeg/png/gif files in a shared Drive folder, ordered by name."""

    def __init__(self, client: httpx.AsyncClient, config: DriveConfig) -> None:
        self._client = client
        self._config = config

    async def list_images(self, folder_id: str) -> list[FolderImage]:
        if not self._config.api_key:
            raise ConfigurationError("Google API Key is not configured")

        params = {
            "q": folder_query(folder_id),
            "key": self._config.api_key,
            "fields": FILE_FIELDS,
            "orderBy": "name",
        }
        try:
            response = await self._client.get(f"{self._config.base_url}/files", params=params)
        except httpx.HTTPError as e:
            logger.error("Google Drive API unreachable: %s", e)
            raise ExternalServiceError(f"Google Drive API error: {e}") from e

        if response.is_error:
            message = _upstream_message(response)
            logger.error("Google Drive API error: %s", message)
            raise ExternalServiceError(f"Google Drive API error: {message}")

        return [
            FolderImage(
                id=f["id"],
                name=f["name"],
                url=f.get("webContentLink"),
                thumbnail=f.get("thumbnailLink"),
            )
            for f in response.json().get("files", [])
        ]
