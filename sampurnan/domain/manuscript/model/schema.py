"""Manuscript field schema.

The single source of truth for manuscript fields: in-app name, store column,
kind and enumerated values. The store table, the row mapper, the import
validator and the template header are all derived from MANUSCRIPT_SCHEMA.
"""

import re
from enum import StrEnum

from sampurnan.domain.shared.model.value import ValueObject


class FieldKind(StrEnum):
    TEXT = "text"
    INTEGER = "integer"
    ENUM = "enum"
    BOOLEAN = "boolean"
    LIST = "list"


class FieldSpec(ValueObject):
    """One manuscript field."""

    name: str
    column: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    allowed: tuple[str, ...] = ()
    description: str = ""

    @property
    def default(self) -> object:
        if self.kind == FieldKind.BOOLEAN:
            return False
        if self.kind == FieldKind.LIST:
            return []
        if self.kind == FieldKind.INTEGER:
            return None
        return ""


class ManuscriptSchema(ValueObject):
    fields: tuple[FieldSpec, ...]

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def required(self) -> list[FieldSpec]:
        return [f for f in self.fields if f.required]

    def get(self, name: str) -> FieldSpec:
        for field in self.fields:
            if field.name == name:
                return field
        raise KeyError(name)

    def by_column(self) -> dict[str, FieldSpec]:
        return {f.column: f for f in self.fields}

    def defaults(self) -> dict[str, object]:
        return {f.name: f.default for f in self.fields}


CATEGORIES = ("Sejarah", "Fikih", "Sastra", "Tasawuf", "Lainnya")
LANGUAGES = ("Jawa Kuno", "Arab", "Melayu", "Jawa", "Sunda")
SCRIPTS = ("Pegon", "Jawa", "Jawi", "Arab", "Sunda Kuno")
READABILITIES = ("Baik", "Cukup", "Sulit Dibaca")

IMAGE_LIST_DELIMITER = ";"

# Integer columns are 32-bit on PostgreSQL.
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1
_PLAIN_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def _text(name: str, column: str, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, column=column, description=description)


def _flag(name: str, column: str, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, column=column, kind=FieldKind.BOOLEAN, description=description)


def _integer(name: str, column: str, description: str = "") -> FieldSpec:
    return FieldSpec(name=name, column=column, kind=FieldKind.INTEGER, description=description)


def _enum(name: str, column: str, allowed: tuple[str, ...]) -> FieldSpec:
    return FieldSpec(name=name, column=column, kind=FieldKind.ENUM, allowed=allowed)


MANUSCRIPT_SCHEMA = ManuscriptSchema(
    fields=(
        # Identity & affiliation
        _text("affiliation", "afiliasi"),
        _text("affiliation_url", "link_digital_afiliasi"),
        _text("collection_name", "nama_koleksi"),
        _text("digitization_number", "nomor_digitalisasi"),
        _text("inventory_code", "kode_inventarisasi"),
        _text("thumbnail_url", "link_kover", "Cover image; defaults to the first image URL"),
        FieldSpec(
            name="image_urls",
            column="link_konten",
            kind=FieldKind.LIST,
            description="Image URLs in display order, separated by ';'",
        ),
        _text("tppkp_url", "link_digital_tppkp"),
        _text("collection_number", "nomor_koleksi"),
        _text("affiliation_title", "judul_dari_afiliasi"),
        FieldSpec(name="title", column="judul_dari_tim", required=True),
        # Classification
        _text("separator_page", "halaman_pemisah"),
        _enum("category", "kategori_kailani", CATEGORIES),
        _text("pesantren_category", "kategori_ilmu_pesantren"),
        # Authorship
        _text("author", "pengarang"),
        _text("scribe", "penyalin"),
        _text("writing_year", "tahun_penulisan_teks", "Year as written in the text"),
        _integer("gregorian_year", "konversi_masehi"),
        _text("copy_location", "lokasi_penyalinan"),
        _text("provenance", "asal_usul_naskah"),
        # Language & script
        _enum("language", "bahasa", LANGUAGES),
        _enum("script", "aksara", SCRIPTS),
        # Material & paper
        _text("watermark", "watermark"),
        _text("countermark", "countermark"),
        _text("cover", "kover"),
        _text("cover_size", "ukuran_kover"),
        _text("binding", "jilid"),
        _text("paper_size", "ukuran_kertas"),
        _text("dimensions", "ukuran_dimensi"),
        # Pages & text
        _integer("page_count", "jumlah_halaman"),
        _text("blank_pages", "halaman_kosong"),
        _text("lines_per_page", "jumlah_baris_per_halaman"),
        _flag("has_marginalia", "catatan_pinggir"),
        _flag("has_glosses", "catatan_makna"),
        # Decoration & ink
        _flag("rubrication", "rubrikasi"),
        _flag("illumination", "iluminasi"),
        _flag("illustration", "ilustrasi"),
        _text("ink", "tinta"),
        # Condition & colophon
        _text("physical_condition", "kondisi_fisik_naskah"),
        _enum("readability", "keterbacaan", READABILITIES),
        _text("completeness", "kelengkapan_naskah"),
        _text("colophon", "kolofon"),
        _text("marginal_notes", "catatan_marginal"),
        _text("description", "deskripsi_umum"),
        _text("notes", "catatan_catatan"),
    )
)


def split_image_urls(value: object) -> list[str]:
    """Split a multi-value image cell on ';', trimming and dropping empty segments."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        segments = [str(v) for v in value if v is not None]
    else:
        segments = str(value).split(IMAGE_LIST_DELIMITER)
    return [s.strip() for s in segments if s.strip()]


def check_integer_range(value: int) -> int:
    """Raises OverflowError when the value does not fit an integer column."""
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise OverflowError(value)
    return value


def parse_integer(text: str) -> int:
    """Plain ASCII decimal integer, optionally signed. Raises ValueError otherwise."""
    text = text.strip()
    if not _PLAIN_INTEGER.fullmatch(text):
        raise ValueError(text)
    return check_integer_range(int(text))


def derive_thumbnail(thumbnail_url: str | None, image_urls: list[str]) -> str:
    """Explicit thumbnail if set, else the first image, else empty string."""
    if thumbnail_url:
        return thumbnail_url
    return image_urls[0] if image_urls else ""
