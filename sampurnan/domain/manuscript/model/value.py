from typing import NewType
from uuid import UUID

from sampurnan.domain.shared.model.identifier import parse_uuid
from sampurnan.domain.shared.model.value import ValueObject

ManuscriptId = NewType("ManuscriptId", UUID)


def parse_manuscript_id(raw: str) -> ManuscriptId:
    return ManuscriptId(parse_uuid(raw, "Manuscript"))


class ManuscriptSummary(ValueObject):
    """Catalog card: the fields a listing needs."""

    id: ManuscriptId
    title: str
    author: str
    inventory_code: str
    category: str
    language: str
    thumbnail_url: str


class CategoryCount(ValueObject):
    category: str
    count: int
