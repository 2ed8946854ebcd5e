from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.schema import MANUSCRIPT_SCHEMA
from sampurnan.domain.manuscript.model.value import ManuscriptId


def as_aware(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; they were written as UTC."""
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def row_to_manuscript(row: dict[str, Any]) -> Manuscript:
    """Convert a manuscripts row (store column names) to a Manuscript (in-app names)."""
    metadata: dict[str, Any] = {}
    for spec in MANUSCRIPT_SCHEMA.fields:
        value = row.get(spec.column)
        metadata[spec.name] = spec.default if value is None else value
    return Manuscript(
        id=ManuscriptId(UUID(row["id"])),
        created_at=as_aware(row["created_at"]),
        metadata=metadata,
    )


def metadata_to_row(metadata: dict[str, Any]) -> dict[str, Any]:
    """Convert an in-app field mapping to store columns. Missing fields take their defaults."""
    return {spec.column: metadata.get(spec.name, spec.default) for spec in MANUSCRIPT_SCHEMA.fields}
