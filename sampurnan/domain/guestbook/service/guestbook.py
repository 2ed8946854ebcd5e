import logging
from datetime import UTC, datetime
from uuid import uuid4

from sampurnan.domain.guestbook.model.entry import EntryId, GuestbookEntry
from sampurnan.domain.guestbook.port.repository import GuestbookRepository
from sampurnan.domain.shared.confirmation import require_confirmation
from sampurnan.domain.shared.error import NotFoundError, ValidationError
from sampurnan.domain.shared.service import Service

logger = logging.getLogger(__name__)


class GuestbookService(Service):
    guestbook_repo: GuestbookRepository

    async def sign(self, *, name: str, origin: str, message: str) -> GuestbookEntry:
        fields = {"name": name.strip(), "origin": origin.strip(), "message": message.strip()}
        for field, value in fields.items():
            if not value:
                raise ValidationError(f"{field} must not be empty.", field=field)

        entry = GuestbookEntry(id=EntryId(uuid4()), created_at=datetime.now(UTC), **fields)
        await self.guestbook_repo.insert(entry)
        logger.info("Guestbook entry %s awaiting moderation", entry.id)
        return entry

    async def approved(self, limit: int | None = None) -> list[GuestbookEntry]:
        return await self.guestbook_repo.list(approved_only=True, limit=limit)

    async def moderation_listing(self) -> list[GuestbookEntry]:
        return await self.guestbook_repo.list(approved_only=False)

    async def toggle_approval(self, id: EntryId) -> list[GuestbookEntry]:
        entry = await self.guestbook_repo.get(id)
        if entry is None:
            raise NotFoundError(f"Guestbook entry not found: {id}")
        await self.guestbook_repo.set_approval(id, not entry.is_approved)
        logger.info("Guestbook entry %s approved=%s", id, not entry.is_approved)
        return await self.moderation_listing()

    async def delete(self, id: EntryId, *, confirmed: bool) -> list[GuestbookEntry]:
        require_confirmation(confirmed, "a guestbook entry")
        if not await self.guestbook_repo.delete(id):
            raise NotFoundError(f"Guestbook entry not found: {id}")
        return await self.moderation_listing()
