from abc import abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel

from sampurnan.domain.manuscript.model.schema import FieldSpec
from sampurnan.domain.shared.error import FormatError
from sampurnan.domain.shared.port import Port

_ZIP_MAGIC = b"PK\x03\x04"


class SpreadsheetFormat(StrEnum):
    CSV = "csv"
    XLSX = "xlsx"

    @property
    def media_type(self) -> str:
        if self is SpreadsheetFormat.CSV:
            return "text/csv"
        return "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    @classmethod
    def detect(cls, filename: str | None, content: bytes) -> "SpreadsheetFormat":
        """Pick a format from the upload's extension, falling back to sniffing the bytes."""
        if filename:
            suffix = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
            if suffix in cls._value2member_map_:
                return cls(suffix)
        if content.startswith(_ZIP_MAGIC):
            return cls.XLSX
        raise FormatError(f"Unsupported file type: {filename or 'unnamed upload'}")


class ImportRow(BaseModel):
    """One decoded data row. ``number`` is 1-based and excludes the header."""

    number: int
    cells: dict[str, Any]
    problem: str | None = None


class SpreadsheetPort(Port, Protocol):
    @abstractmethod
    def decode(self, content: bytes, expected_fields: list[str]) -> list[ImportRow]: ...

    @abstractmethod
    def encode_template(self, fields: Sequence[FieldSpec]) -> bytes:
        """Header-only file: the field names in order, no data rows."""
        ...


class SpreadsheetCodecs:
    """Codec lookup by file format."""

    def __init__(self, codecs: dict[SpreadsheetFormat, SpreadsheetPort]) -> None:
        self._codecs = codecs

    def for_format(self, fmt: SpreadsheetFormat) -> SpreadsheetPort:
        try:
            return self._codecs[fmt]
        except KeyError:
            raise FormatError(f"No codec registered for {fmt}") from None
