"""Single-record form normalization.

The admin form saves what it is given: enum-backed fields accept free text,
only the title invariant and field types are enforced. Fields absent from the
payload take their defaults (full-record replace).
"""

import re
from typing import Any

from sampurnan.domain.manuscript.model.schema import (
    MANUSCRIPT_SCHEMA,
    FieldKind,
    ManuscriptSchema,
    check_integer_range,
    derive_thumbnail,
    parse_integer,
    split_image_urls,
)
from sampurnan.domain.shared.error import ValidationError

# The form's image box takes URLs separated by commas, semicolons or whitespace.
_FORM_URL_SEPARATORS = re.compile(r"[\s,;]+")


def normalize_form(payload: dict[str, Any], schema: ManuscriptSchema = MANUSCRIPT_SCHEMA) -> dict[str, Any]:
    unknown = sorted(set(payload) - set(schema.names))
    if unknown:
        raise ValidationError(f"Unknown field: {unknown[0]}", field=unknown[0])

    record = schema.defaults()
    for spec in schema.fields:
        if spec.name not in payload or payload[spec.name] is None:
            continue
        raw = payload[spec.name]
        match spec.kind:
            case FieldKind.LIST:
                if isinstance(raw, str):
                    raw = _FORM_URL_SEPARATORS.split(raw)
                if not isinstance(raw, (list, tuple)):
                    raise ValidationError(f"{spec.name} must be a list of URLs.", field=spec.name)
                record[spec.name] = split_image_urls(raw)
            case FieldKind.BOOLEAN:
                if not isinstance(raw, bool):
                    raise ValidationError(f"{spec.name} must be true or false.", field=spec.name)
                record[spec.name] = raw
            case FieldKind.INTEGER:
                record[spec.name] = _form_integer(spec.name, raw)
            case _:
                if not isinstance(raw, (str, int, float)) or isinstance(raw, bool):
                    raise ValidationError(f"{spec.name} must be text.", field=spec.name)
                record[spec.name] = str(raw).strip()

    if not record["title"]:
        raise ValidationError("title must not be empty.", field="title")
    record["thumbnail_url"] = derive_thumbnail(record["thumbnail_url"], record["image_urls"])
    return record


def _form_integer(name: str, raw: Any) -> int | None:
    if isinstance(raw, str) and not raw.strip():
        return None
    try:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return check_integer_range(raw)
        if isinstance(raw, str):
            return parse_integer(raw)
    except ValueError:
        pass
    except OverflowError:
        raise ValidationError(f"{name} is out of range.", field=name) from None
    raise ValidationError(f"{name} must be numeric.", field=name)
