"""Row-level validation and coercion for bulk manuscript import.

Each decoded row becomes either a typed field mapping or one or more
``Row N: ...`` messages. The batch is all-or-nothing: any error yields zero
records.
"""

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel

from sampurnan.domain.manuscript.model.schema import (
    MANUSCRIPT_SCHEMA,
    FieldKind,
    FieldSpec,
    ManuscriptSchema,
    check_integer_range,
    derive_thumbnail,
    parse_integer,
    split_image_urls,
)
from sampurnan.domain.manuscript.port.spreadsheet import ImportRow

TRUTHY = frozenset({"true", "yes", "y", "ya", "1", "x"})


class ValidationReport(BaseModel):
    records: list[dict[str, Any]] = []
    errors: list[str] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def coerce_text(value: Any) -> str:
    """Trimmed string; integer-valued floats lose their decimal part."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime) and value.time() == time():
        return value.date().isoformat()
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).strip()


def coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return False


def coerce_integer(value: Any) -> int | None:
    """Parse an integer cell.

    Raises ValueError when the value is not a whole number and OverflowError
    when it does not fit an integer column.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, int):
        return check_integer_range(value)
    if isinstance(value, float):
        if value.is_integer():
            return check_integer_range(int(value))
        raise ValueError(value)
    return parse_integer(str(value))


def _coerce_field(row_number: int, spec: FieldSpec, raw: Any) -> tuple[Any, str | None]:
    match spec.kind:
        case FieldKind.LIST:
            return split_image_urls(raw), None
        case FieldKind.BOOLEAN:
            return coerce_flag(raw), None
        case FieldKind.INTEGER:
            try:
                return coerce_integer(raw), None
            except ValueError:
                return None, f"Row {row_number}: {spec.name} must be numeric."
            except OverflowError:
                return None, f"Row {row_number}: {spec.name} is out of range."
        case FieldKind.ENUM:
            text = coerce_text(raw)
            if text and text not in spec.allowed:
                return text, f'Row {row_number}: invalid {spec.name}: "{text}".'
            return text, None
        case _:
            return coerce_text(raw), None


def coerce_row(row: ImportRow, schema: ManuscriptSchema = MANUSCRIPT_SCHEMA) -> tuple[dict[str, Any], list[str]]:
    """Coerce one row into a field mapping, collecting every problem found in it."""
    if row.problem:
        return {}, [f"Row {row.number}: {row.problem}"]

    record: dict[str, Any] = {}
    errors: list[str] = []
    for spec in schema.fields:
        raw = row.cells.get(spec.name)
        if spec.required and is_blank(raw):
            errors.append(f"Row {row.number}: {spec.name} must not be empty.")
            continue
        value, error = _coerce_field(row.number, spec, raw)
        if error:
            errors.append(error)
        record[spec.name] = value

    if not errors:
        record["thumbnail_url"] = derive_thumbnail(record.get("thumbnail_url"), record.get("image_urls", []))
    return record, errors


def validate_rows(rows: list[ImportRow], schema: ManuscriptSchema = MANUSCRIPT_SCHEMA) -> ValidationReport:
    records: list[dict[str, Any]] = []
    errors: list[str] = []
    for row in rows:
        record, row_errors = coerce_row(row, schema)
        errors.extend(row_errors)
        if not row_errors:
            records.append(record)

    if errors:
        return ValidationReport(errors=errors)
    return ValidationReport(records=records)
