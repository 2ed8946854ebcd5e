import logging
from typing import Any

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.catalog import SortKey
from sampurnan.domain.manuscript.model.form import normalize_form
from sampurnan.domain.manuscript.model.value import CategoryCount, ManuscriptId
from sampurnan.domain.manuscript.port.repository import ManuscriptRepository
from sampurnan.domain.shared.confirmation import require_confirmation
from sampurnan.domain.shared.error import NotFoundError
from sampurnan.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ManuscriptService(Service):
    manuscript_repo: ManuscriptRepository
    sort_key: SortKey
    page_size: int

    async def get(self, id: ManuscriptId) -> Manuscript:
        manuscript = await self.manuscript_repo.get(id)
        if manuscript is None:
            raise NotFoundError(f"Manuscript not found: {id}")
        return manuscript

    async def list_all(self) -> list[Manuscript]:
        return await self.manuscript_repo.list(sort=self.sort_key)

    async def latest(self, limit: int) -> list[Manuscript]:
        return await self.manuscript_repo.list(sort=SortKey.RECENT, limit=limit)

    async def category_counts(self) -> list[CategoryCount]:
        return await self.manuscript_repo.category_counts()

    async def create(self, payload: dict[str, Any]) -> Manuscript:
        manuscript = await self.manuscript_repo.insert(normalize_form(payload))
        logger.info("Created manuscript %s", manuscript.id)
        return manuscript

    async def replace(self, id: ManuscriptId, payload: dict[str, Any]) -> Manuscript:
        metadata = normalize_form(payload)
        manuscript = await self.manuscript_repo.replace(id, metadata)
        if manuscript is None:
            raise NotFoundError(f"Manuscript not found: {id}")
        return manuscript

    async def delete(self, id: ManuscriptId, *, confirmed: bool) -> None:
        require_confirmation(confirmed, "a manuscript")
        if not await self.manuscript_repo.delete(id):
            raise NotFoundError(f"Manuscript not found: {id}")
        logger.info("Deleted manuscript %s", id)
