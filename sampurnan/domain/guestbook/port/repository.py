from __future__ import annotations

from abc import abstractmethod
from typing import List, Protocol

from sampurnan.domain.guestbook.model.entry import EntryId, GuestbookEntry
from sampurnan.domain.shared.port import Port


class GuestbookRepository(Port, Protocol):
    @abstractmethod
    async def get(self, id: EntryId) -> GuestbookEntry | None: ...

    @abstractmethod
    async def list(self, *, approved_only: bool, limit: int | None = None) -> List[GuestbookEntry]:
        """Newest first."""
        ...

    @abstractmethod
    async def insert(self, entry: GuestbookEntry) -> None: ...

    @abstractmethod
    async def set_approval(self, id: EntryId, approved: bool) -> None:
        """Single-field update of the approval flag."""
        ...

    @abstractmethod
    async def delete(self, id: EntryId) -> bool: ...
