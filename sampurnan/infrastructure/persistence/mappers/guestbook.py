from typing import Any
from uuid import UUID

from sampurnan.domain.guestbook.model.entry import EntryId, GuestbookEntry
from sampurnan.infrastructure.persistence.mappers.manuscript import as_aware


def row_to_entry(row: dict[str, Any]) -> GuestbookEntry:
    return GuestbookEntry(
        id=EntryId(UUID(row["id"])),
        name=row["name"],
        origin=row["origin"],
        message=row["message"],
        is_approved=bool(row["is_approved"]),
        created_at=as_aware(row["created_at"]),
    )


def entry_to_dict(entry: GuestbookEntry) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "origin": entry.origin,
        "message": entry.message,
        "is_approved": entry.is_approved,
        "created_at": entry.created_at,
    }
