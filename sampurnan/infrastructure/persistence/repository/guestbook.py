from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sampurnan.domain.guestbook.model.entry import EntryId, GuestbookEntry
from sampurnan.domain.guestbook.port.repository import GuestbookRepository
from sampurnan.infrastructure.persistence.mappers.guestbook import entry_to_dict, row_to_entry
from sampurnan.infrastructure.persistence.repository.base import execute
from sampurnan.infrastructure.persistence.tables import guestbook_entries_table

logger = logging.getLogger(__name__)

_t = guestbook_entries_table


class SQLAlchemyGuestbookRepository(GuestbookRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, id: EntryId) -> GuestbookEntry | None:
        result = await execute(self.session, select(_t).where(_t.c.id == str(id)))
        row = result.mappings().first()
        return row_to_entry(dict(row)) if row else None

    async def list(self, *, approved_only: bool, limit: int | None = None) -> List[GuestbookEntry]:
        stmt = select(_t).order_by(_t.c.created_at.desc())
        if approved_only:
            stmt = stmt.where(_t.c.is_approved.is_(True))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await execute(self.session, stmt)
        return [row_to_entry(dict(r)) for r in result.mappings().all()]

    async def insert(self, entry: GuestbookEntry) -> None:
        await execute(self.session, insert(_t).values(**entry_to_dict(entry)))
        logger.debug("Inserted guestbook entry %s", entry.id)

    async def set_approval(self, id: EntryId, approved: bool) -> None:
        await execute(self.session, update(_t).where(_t.c.id == str(id)).values(is_approved=approved))
        logger.debug("Set guestbook entry %s approved=%s", id, approved)

    async def delete(self, id: EntryId) -> bool:
        result = await execute(self.session, delete(_t).where(_t.c.id == str(id)))
        return result.rowcount > 0
