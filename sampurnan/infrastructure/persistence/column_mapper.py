"""Map manuscript FieldSpecs to SQLAlchemy columns."""

from collections.abc import Callable
from typing import Any

import sqlalchemy as sa

from sampurnan.domain.manuscript.model.schema import FieldKind, FieldSpec

_TYPE_MAP: dict[FieldKind, Callable[[], Any]] = {
    FieldKind.TEXT: sa.Text,
    FieldKind.ENUM: sa.Text,
    FieldKind.INTEGER: sa.Integer,
    FieldKind.BOOLEAN: sa.Boolean,
    FieldKind.LIST: sa.JSON,
}


def map_column(spec: FieldSpec) -> sa.Column:
    """Convert a FieldSpec to a SQLAlchemy Column named after its store column."""
    if spec.kind == FieldKind.BOOLEAN:
        return sa.Column(spec.column, sa.Boolean, nullable=False, server_default=sa.false())
    return sa.Column(spec.column, _TYPE_MAP[spec.kind](), nullable=not spec.required)
