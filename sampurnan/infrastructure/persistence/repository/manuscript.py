from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, List
from uuid import uuid4

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.catalog import SortKey
from sampurnan.domain.manuscript.model.value import CategoryCount, ManuscriptId
from sampurnan.domain.manuscript.port.repository import ManuscriptRepository
from sampurnan.infrastructure.persistence.mappers.manuscript import metadata_to_row, row_to_manuscript
from sampurnan.infrastructure.persistence.repository.base import execute
from sampurnan.infrastructure.persistence.tables import manuscripts_table

logger = logging.getLogger(__name__)

_t = manuscripts_table


class SQLAlchemyManuscriptRepository(ManuscriptRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, id: ManuscriptId) -> Manuscript | None:
        result = await execute(self.session, select(_t).where(_t.c.id == str(id)))
        row = result.mappings().first()
        return row_to_manuscript(dict(row)) if row else None

    async def list(self, *, sort: SortKey, limit: int | None = None) -> List[Manuscript]:
        stmt = select(_t)
        if sort == SortKey.RECENT:
            stmt = stmt.order_by(_t.c.created_at.desc())
        else:
            stmt = stmt.order_by(_t.c.judul_dari_tim.asc(), _t.c.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await execute(self.session, stmt)
        return [row_to_manuscript(dict(r)) for r in result.mappings().all()]

    async def insert(self, metadata: dict[str, Any]) -> Manuscript:
        row = self._new_row(metadata)
        await execute(self.session, insert(_t).values(**row))
        logger.debug("Inserted manuscript %s", row["id"])
        return row_to_manuscript(row)

    async def insert_many(self, records: List[dict[str, Any]]) -> int:
        if not records:
            return 0
        rows = [self._new_row(r) for r in records]
        await execute(self.session, insert(_t), rows)
        logger.debug("Batch-inserted %d manuscripts", len(rows))
        return len(rows)

    async def replace(self, id: ManuscriptId, metadata: dict[str, Any]) -> Manuscript | None:
        stmt = update(_t).where(_t.c.id == str(id)).values(**metadata_to_row(metadata))
        result = await execute(self.session, stmt)
        if result.rowcount == 0:
            return None
        logger.debug("Replaced manuscript %s", id)
        return await self.get(id)

    async def delete(self, id: ManuscriptId) -> bool:
        result = await execute(self.session, delete(_t).where(_t.c.id == str(id)))
        return result.rowcount > 0

    async def category_counts(self) -> List[CategoryCount]:
        category = _t.c.kategori_kailani
        stmt = (
            select(category, func.count().label("count"))
            .where(category.is_not(None), category != "")
            .group_by(category)
            .order_by(category)
        )
        result = await execute(self.session, stmt)
        return [CategoryCount(category=r[0], count=r[1]) for r in result.all()]

    @staticmethod
    def _new_row(metadata: dict[str, Any]) -> dict[str, Any]:
        return {"id": str(uuid4()), "created_at": datetime.now(UTC), **metadata_to_row(metadata)}
