"""Manuscript aggregate - one physical manuscript's catalog entry."""

from datetime import datetime
from typing import Any

from sampurnan.domain.manuscript.model.value import ManuscriptId
from sampurnan.domain.shared.model.aggregate import Aggregate


class Manuscript(Aggregate):
    """A catalog entry.

    ``id`` and ``created_at`` are assigned by the store. ``metadata`` holds
    every schema field keyed by its in-app name, already coerced.
    """

    id: ManuscriptId
    created_at: datetime
    metadata: dict[str, Any]

    @property
    def title(self) -> str:
        return self.metadata.get("title", "")

    @property
    def author(self) -> str:
        return self.metadata.get("author") or ""

    @property
    def inventory_code(self) -> str:
        return self.metadata.get("inventory_code") or ""

    @property
    def category(self) -> str:
        return self.metadata.get("category") or ""

    @property
    def language(self) -> str:
        return self.metadata.get("language") or ""

    @property
    def description(self) -> str:
        return self.metadata.get("description") or ""

    @property
    def image_urls(self) -> list[str]:
        return list(self.metadata.get("image_urls") or [])

    @property
    def thumbnail_url(self) -> str:
        return self.metadata.get("thumbnail_url") or ""
