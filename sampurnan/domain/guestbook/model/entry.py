from datetime import datetime
from typing import NewType
from uuid import UUID

from sampurnan.domain.shared.model.aggregate import Aggregate
from sampurnan.domain.shared.model.identifier import parse_uuid

EntryId = NewType("EntryId", UUID)


class GuestbookEntry(Aggregate):
    """A visitor's message. Hidden from the public listing until approved."""

    id: EntryId
    name: str
    origin: str
    message: str
    is_approved: bool = False
    created_at: datetime


def parse_entry_id(raw: str) -> EntryId:
    return EntryId(parse_uuid(raw, "Guestbook entry"))
