"""Spreadsheet codecs for manuscript import files and templates.

CSV is strict: exact header, exact cell count per row. XLSX (openpyxl) is
lenient: header compared trimmed and case-insensitively, trailing empty cells
ignored, short rows padded.
"""

import csv
import io
import zlib
from collections.abc import Iterable, Sequence
from typing import Any
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.comments import Comment
from openpyxl.styles import Font, PatternFill
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.datavalidation import DataValidation

from sampurnan.domain.manuscript.model.schema import FieldKind, FieldSpec
from sampurnan.domain.manuscript.port.spreadsheet import ImportRow, SpreadsheetPort
from sampurnan.domain.shared.error import FormatError

_REQUIRED_FILL = PatternFill(start_color="FFFFEE", end_color="FFFFEE", fill_type="solid")
_REQUIRED_FONT = Font(bold=True)
_COLUMN_WIDTH = 20
# Dropdowns cover this many data rows below the header.
_VALIDATION_ROWS = 1000


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_header(found: list[str], expected: list[str], *, normalize=lambda s: s) -> None:
    if [normalize(h) for h in found] == [normalize(e) for e in expected]:
        return
    for position, (got, want) in enumerate(zip(found, expected), 1):
        if normalize(got) != normalize(want):
            raise FormatError(f'Header mismatch in column {position}: expected "{want}", found "{got}".')
    raise FormatError(f"Header has {len(found)} columns, expected {len(expected)}.")


def _data_rows(rows: Iterable[ImportRow]) -> list[ImportRow]:
    decoded = list(rows)
    if not decoded:
        raise FormatError("File contains no data rows.")
    return decoded


class CsvSpreadsheetCodec(SpreadsheetPort):
    def decode(self, content: bytes, expected_fields: list[str]) -> list[ImportRow]:
        try:
            text = content.decode("utf-8-sig")
            rows = list(csv.reader(io.StringIO(text, newline="")))
        except (UnicodeDecodeError, csv.Error) as e:
            raise FormatError(f"Could not read CSV file: {e}") from e

        if not rows or all(_is_blank(c) for c in rows[0]):
            raise FormatError("File has no header row.")
        header = rows[0]
        _check_header(header, expected_fields)

        return _data_rows(self._rows(rows[1:], header))

    def _rows(self, rows: list[list[str]], header: list[str]) -> Iterable[ImportRow]:
        for number, cells in enumerate(rows, 1):
            if all(_is_blank(c) for c in cells):
                continue
            if len(cells) != len(header):
                yield ImportRow(
                    number=number,
                    cells={},
                    problem=f"expected {len(header)} cells, found {len(cells)}.",
                )
                continue
            yield ImportRow(number=number, cells=dict(zip(header, cells)))

    def encode_template(self, fields: Sequence[FieldSpec]) -> bytes:
        buf = io.StringIO(newline="")
        csv.writer(buf).writerow([f.name for f in fields])
        return buf.getvalue().encode("utf-8")


class XlsxSpreadsheetCodec(SpreadsheetPort):
    def decode(self, content: bytes, expected_fields: list[str]) -> list[ImportRow]:
        try:
            wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        except (InvalidFileException, BadZipFile, KeyError, OSError, SyntaxError, ValueError) as e:
            raise FormatError(f"Could not read workbook: {e}") from e

        try:
            if not wb.worksheets:
                raise FormatError("Workbook has no sheets.")
            rows = wb.worksheets[0].iter_rows(values_only=True)

            header_cells = next(rows, None)
            header = ["" if c is None else str(c).strip() for c in header_cells or ()]
            while header and not header[-1]:
                header.pop()
            if not header:
                raise FormatError("File has no header row.")
            _check_header(header, expected_fields, normalize=str.lower)

            return _data_rows(self._rows(rows, expected_fields))
        except (SyntaxError, ValueError, KeyError, TypeError, EOFError, BadZipFile, zlib.error) as e:
            # Read-only sheets are parsed lazily, so corrupt XML only surfaces while iterating.
            raise FormatError(f"Could not read workbook: {e}") from e
        finally:
            wb.close()

    def _rows(self, rows: Iterable[tuple[Any, ...]], fields: list[str]) -> Iterable[ImportRow]:
        width = len(fields)
        for number, values in enumerate(rows, 1):
            values = list(values)
            if all(_is_blank(v) for v in values):
                continue
            overflow = [v for v in values[width:] if not _is_blank(v)]
            if overflow:
                yield ImportRow(
                    number=number,
                    cells={},
                    problem=f"row has values beyond the {width} header columns.",
                )
                continue
            padded = values[:width] + [None] * (width - len(values))
            yield ImportRow(number=number, cells=dict(zip(fields, padded)))

    def encode_template(self, fields: Sequence[FieldSpec]) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = "Manuscripts"

        for col_idx, field in enumerate(fields, 1):
            cell = ws.cell(row=1, column=col_idx, value=field.name)
            if field.required:
                cell.font = _REQUIRED_FONT
                cell.fill = _REQUIRED_FILL
            if field.description:
                cell.comment = Comment(field.description, "Sampurnan")

            if field.kind == FieldKind.ENUM and field.allowed:
                dv = DataValidation(
                    type="list",
                    formula1='"' + ",".join(field.allowed) + '"',
                    allow_blank=not field.required,
                )
                first = ws.cell(row=2, column=col_idx).coordinate
                last = ws.cell(row=_VALIDATION_ROWS + 1, column=col_idx).coordinate
                dv.add(f"{first}:{last}")
                ws.add_data_validation(dv)

            ws.column_dimensions[cell.column_letter].width = _COLUMN_WIDTH

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
