"""Store columns generated from the manuscript field schema."""

import sqlalchemy as sa

from sampurnan.domain.manuscript.model.schema import MANUSCRIPT_SCHEMA, FieldKind, FieldSpec
from sampurnan.infrastructure.persistence.column_mapper import map_column
from sampurnan.infrastructure.persistence.migrate import to_sync_url
from sampurnan.infrastructure.persistence.tables import manuscripts_table


def test_text_field_is_nullable_text():
    column = map_column(FieldSpec(name="author", column="pengarang"))
    assert column.name == "pengarang"
    assert isinstance(column.type, sa.Text)
    assert column.nullable is True


def test_required_field_is_not_null():
    assert map_column(MANUSCRIPT_SCHEMA.get("title")).nullable is False


def test_flag_defaults_to_false_in_store():
    column = map_column(FieldSpec(name="rubrication", column="rubrikasi", kind=FieldKind.BOOLEAN))
    assert isinstance(column.type, sa.Boolean)
    assert column.nullable is False
    assert column.server_default is not None


def test_image_list_is_json():
    assert isinstance(map_column(MANUSCRIPT_SCHEMA.get("image_urls")).type, sa.JSON)


def test_table_has_a_column_per_field():
    columns = set(manuscripts_table.c.keys())
    assert {spec.column for spec in MANUSCRIPT_SCHEMA.fields} <= columns
    assert len(columns) == len(MANUSCRIPT_SCHEMA.fields) + 2


def test_sync_url_for_migrations():
    assert to_sync_url("sqlite+aiosqlite:///data/app.db") == "sqlite:///data/app.db"
    assert to_sync_url("postgresql+asyncpg://u:p@db/naskah") == "postgresql://u:p@db/naskah"
