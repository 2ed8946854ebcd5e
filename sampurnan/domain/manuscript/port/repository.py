from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Protocol

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.catalog import SortKey
from sampurnan.domain.manuscript.model.value import CategoryCount, ManuscriptId
from sampurnan.domain.shared.port import Port


class ManuscriptRepository(Port, Protocol):
    @abstractmethod
    async def get(self, id: ManuscriptId) -> Manuscript | None: ...

    @abstractmethod
    async def list(self, *, sort: SortKey, limit: int | None = None) -> List[Manuscript]: ...

    @abstractmethod
    async def insert(self, metadata: dict[str, Any]) -> Manuscript: ...

    @abstractmethod
    async def insert_many(self, records: List[dict[str, Any]]) -> int:
        """Write every record in one batch. Raises StoreError and writes nothing on rejection."""
        ...

    @abstractmethod
    async def replace(self, id: ManuscriptId, metadata: dict[str, Any]) -> Manuscript | None: ...

    @abstractmethod
    async def delete(self, id: ManuscriptId) -> bool: ...

    @abstractmethod
    async def category_counts(self) -> List[CategoryCount]: ...
