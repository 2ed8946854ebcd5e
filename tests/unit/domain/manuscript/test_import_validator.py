"""Unit tests for import row coercion and all-or-nothing validation."""

from datetime import datetime

import pytest

from sampurnan.domain.manuscript.port.spreadsheet import ImportRow
from sampurnan.domain.manuscript.service.import_validator import (
    coerce_flag,
    coerce_integer,
    coerce_row,
    coerce_text,
    validate_rows,
)


def make_row(number: int = 1, **cells) -> ImportRow:
    return ImportRow(number=number, cells={"title": "Serat Centhini", **cells})


class TestCoerceRow:
    def test_typed_record_from_text_cells(self):
        record, errors = coerce_row(
            make_row(
                category="Sastra",
                language="Jawa",
                image_urls=" a.jpg ; ;b.jpg ",
                page_count=212.0,
                has_marginalia="Ya",
                rubrication="no",
            )
        )

        assert errors == []
        assert record["title"] == "Serat Centhini"
        assert record["category"] == "Sastra"
        assert record["image_urls"] == ["a.jpg", "b.jpg"]
        assert record["page_count"] == 212
        assert record["has_marginalia"] is True
        assert record["rubrication"] is False
        assert record["gregorian_year"] is None
        assert record["author"] == ""

    def test_thumbnail_defaults_to_first_image(self):
        record, _ = coerce_row(make_row(image_urls="a.jpg;b.jpg"))
        assert record["thumbnail_url"] == "a.jpg"

    def test_explicit_thumbnail_is_kept(self):
        record, _ = coerce_row(make_row(image_urls="a.jpg;b.jpg", thumbnail_url="cover.jpg"))
        assert record["thumbnail_url"] == "cover.jpg"

    def test_no_images_gives_empty_thumbnail(self):
        record, _ = coerce_row(make_row())
        assert record["image_urls"] == []
        assert record["thumbnail_url"] == ""

    def test_blank_title_is_reported(self):
        _, errors = coerce_row(ImportRow(number=4, cells={"title": "   "}))
        assert errors == ["Row 4: title must not be empty."]

    def test_unknown_enum_value_is_reported(self):
        _, errors = coerce_row(make_row(number=2, category="Puisi"))
        assert errors == ['Row 2: invalid category: "Puisi".']

    def test_blank_enum_is_allowed(self):
        record, errors = coerce_row(make_row(script=""))
        assert errors == []
        assert record["script"] == ""

    def test_non_numeric_integer_is_reported(self):
        _, errors = coerce_row(make_row(number=3, page_count="dua ratus"))
        assert errors == ["Row 3: page_count must be numeric."]

    def test_every_problem_in_a_row_is_reported(self):
        _, errors = coerce_row(
            ImportRow(number=7, cells={"title": "", "language": "Latin", "gregorian_year": "abad 18"})
        )
        assert errors == [
            "Row 7: title must not be empty.",
            "Row 7: gregorian_year must be numeric.",
            'Row 7: invalid language: "Latin".',
        ]

    def test_decoder_problem_becomes_row_error(self):
        row = ImportRow(number=5, cells={}, problem="expected 45 cells, found 3.")
        _, errors = coerce_row(row)
        assert errors == ["Row 5: expected 45 cells, found 3."]


class TestValidateRows:
    def test_all_valid_rows_become_records(self):
        report = validate_rows([make_row(1), make_row(2, title="Babad Tanah Jawi")])

        assert report.ok
        assert [r["title"] for r in report.records] == ["Serat Centhini", "Babad Tanah Jawi"]

    def test_one_bad_row_rejects_the_batch(self):
        report = validate_rows([make_row(1), make_row(2, category="Puisi"), make_row(3)])

        assert not report.ok
        assert report.records == []
        assert report.errors == ['Row 2: invalid category: "Puisi".']


class TestCellCoercion:
    def test_integer_valued_float_loses_decimal(self):
        assert coerce_text(1850.0) == "1850"

    def test_midnight_datetime_becomes_date(self):
        assert coerce_text(datetime(1850, 3, 1)) == "1850-03-01"

    def test_none_becomes_empty_text(self):
        assert coerce_text(None) == ""

    def test_truthy_flag_spellings(self):
        assert all(coerce_flag(v) for v in ("TRUE", "yes", "y", "Ya", "1", "x", 1, True))

    def test_other_flag_values_are_false(self):
        assert not any(coerce_flag(v) for v in ("false", "tidak", "", None, 0))

    def test_integer_cells(self):
        assert coerce_integer(" 42 ") == 42
        assert coerce_integer("") is None
        assert coerce_integer(7.0) == 7

    @pytest.mark.parametrize("value", ["1_000", "٣٤", "1e3", "0x10", "12.5"])
    def test_only_plain_decimal_integers(self, value):
        with pytest.raises(ValueError):
            coerce_integer(value)

    @pytest.mark.parametrize("value", ["99999999999999999999", 2**31, -(2**31) - 1, 1e30])
    def test_integers_must_fit_the_column(self, value):
        with pytest.raises(OverflowError):
            coerce_integer(value)

    def test_signed_integer_text(self):
        assert coerce_integer("-12") == -12
        assert coerce_integer("+7") == 7


class TestIntegerRowErrors:
    def test_underscored_number_is_not_numeric(self):
        report = validate_rows([make_row(title="Serat", page_count="1_000")])
        assert report.errors == ["Row 1: page_count must be numeric."]

    def test_oversized_number_is_out_of_range(self):
        report = validate_rows([make_row(title="Serat", gregorian_year="99999999999999999999")])
        assert report.errors == ["Row 1: gregorian_year is out of range."]
