"""Unit tests for catalog filtering and pagination."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.catalog import CatalogFilter, CatalogView
from sampurnan.domain.manuscript.model.value import ManuscriptId


def make_manuscript(title: str, **metadata) -> Manuscript:
    return Manuscript(
        id=ManuscriptId(uuid4()),
        created_at=datetime.now(UTC),
        metadata={"title": title, **metadata},
    )


@pytest.fixture
def records() -> list[Manuscript]:
    items = [make_manuscript(f"Serat {i:02d}", category="Sastra", language="Jawa") for i in range(20)]
    items += [
        make_manuscript("Kitab Fikih", category="Fikih", language="Arab", author="Syekh Nawawi"),
        make_manuscript("Hikayat Aceh", category="Sejarah", language="Melayu", inventory_code="ACH-001"),
        make_manuscript("Suluk Wujil", category="Tasawuf", language="Jawa"),
    ]
    return items


class TestCatalogFilter:
    def test_search_matches_author_case_insensitively(self):
        manuscript = make_manuscript("Kitab", author="Syekh Nawawi")
        assert CatalogFilter(search="nawawi").matches(manuscript)

    def test_search_matches_inventory_code(self):
        manuscript = make_manuscript("Hikayat", inventory_code="ACH-001")
        assert CatalogFilter(search="ach-0").matches(manuscript)

    def test_search_and_filters_intersect(self):
        manuscript = make_manuscript("Suluk Wujil", category="Tasawuf", language="Jawa")
        assert CatalogFilter(search="suluk", category="Tasawuf", language="Jawa").matches(manuscript)
        assert not CatalogFilter(search="suluk", category="Sastra").matches(manuscript)


class TestCatalogView:
    def test_first_page_of_ten(self, records):
        page = CatalogView(records).current()

        assert page.page == 1
        assert len(page.items) == 10
        assert page.total == 23
        assert page.total_pages == 3
        assert page.has_next
        assert not page.has_previous

    def test_last_page_holds_remainder(self, records):
        view = CatalogView(records)
        view.next_page()
        view.next_page()

        page = view.current()
        assert page.page == 3
        assert len(page.items) == 3
        assert not page.has_next

    def test_next_past_the_end_is_a_no_op(self, records):
        view = CatalogView(records)
        for _ in range(5):
            view.next_page()
        assert view.page == 3

    def test_previous_on_first_page_is_a_no_op(self, records):
        view = CatalogView(records)
        view.previous_page()
        assert view.page == 1

    def test_changing_search_resets_to_first_page(self, records):
        view = CatalogView(records)
        view.next_page()
        view.set_search("serat")
        assert view.page == 1
        assert view.current().total == 20

    def test_changing_filter_resets_to_first_page(self, records):
        view = CatalogView(records)
        view.go_to(3)
        view.set_language("Jawa")
        assert view.page == 1
        assert view.current().total == 21

    def test_go_to_is_clamped(self, records):
        view = CatalogView(records)
        view.go_to(99)
        assert view.page == 3
        view.go_to(0)
        assert view.page == 1

    def test_no_matches_is_an_empty_page(self, records):
        view = CatalogView(records)
        view.set_search("tidak ada")

        page = view.current()
        assert page.empty
        assert page.items == []
        assert page.total_pages == 0
        assert not page.has_next

    def test_blank_filter_clears_it(self, records):
        view = CatalogView(records)
        view.set_category("Fikih")
        view.set_category("")
        assert view.filter.category is None
        assert view.current().total == 23

    def test_order_of_records_is_kept(self, records):
        page = CatalogView(records, page_size=3).current()
        assert [s.title for s in page.items] == ["Serat 00", "Serat 01", "Serat 02"]

    def test_rejects_non_positive_page_size(self, records):
        with pytest.raises(ValueError):
            CatalogView(records, page_size=0)


def test_twelve_matches_out_of_twenty_five_span_two_pages():
    records = [make_manuscript(f"Hikayat {i}") for i in range(12)]
    records += [make_manuscript(f"Serat {i}") for i in range(13)]
    view = CatalogView(records)
    view.set_search("hikayat")

    first = view.current()
    view.next_page()
    second = view.current()
    view.next_page()

    assert len(first.items) == 10
    assert len(second.items) == 2
    assert second.total_pages == 2
    assert not second.has_next
    assert view.page == 2
