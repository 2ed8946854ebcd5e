"""Unit tests for single-record form normalization."""

import pytest

from sampurnan.domain.manuscript.model.form import normalize_form
from sampurnan.domain.shared.error import ValidationError


def test_absent_fields_take_defaults():
    record = normalize_form({"title": "Serat Menak"})

    assert record["title"] == "Serat Menak"
    assert record["author"] == ""
    assert record["image_urls"] == []
    assert record["illumination"] is False
    assert record["page_count"] is None


def test_image_box_splits_on_commas_semicolons_and_whitespace():
    record = normalize_form({"title": "Serat", "image_urls": "a.jpg, b.jpg;c.jpg\nd.jpg"})

    assert record["image_urls"] == ["a.jpg", "b.jpg", "c.jpg", "d.jpg"]
    assert record["thumbnail_url"] == "a.jpg"


def test_enum_fields_accept_free_text():
    record = normalize_form({"title": "Serat", "category": "Puisi"})
    assert record["category"] == "Puisi"


def test_text_is_trimmed():
    record = normalize_form({"title": "  Serat Wedhatama  ", "author": " Mangkunegara IV "})
    assert record["title"] == "Serat Wedhatama"
    assert record["author"] == "Mangkunegara IV"


def test_integer_from_text():
    assert normalize_form({"title": "Serat", "page_count": "120"})["page_count"] == 120
    assert normalize_form({"title": "Serat", "page_count": ""})["page_count"] is None


@pytest.mark.parametrize(
    "payload, field",
    [
        ({"title": "   "}, "title"),
        ({}, "title"),
        ({"title": "Serat", "page_count": "banyak"}, "page_count"),
        ({"title": "Serat", "page_count": "1_000"}, "page_count"),
        ({"title": "Serat", "page_count": 2**31}, "page_count"),
        ({"title": "Serat", "gregorian_year": "99999999999999999999"}, "gregorian_year"),
        ({"title": "Serat", "illumination": "yes"}, "illumination"),
        ({"title": "Serat", "shelf": "B2"}, "shelf"),
    ],
)
def test_rejected_payloads_name_the_field(payload, field):
    with pytest.raises(ValidationError) as exc_info:
        normalize_form(payload)
    assert exc_info.value.field == field


def test_oversized_integer_message():
    with pytest.raises(ValidationError, match="gregorian_year is out of range"):
        normalize_form({"title": "Serat", "gregorian_year": 10**20})
