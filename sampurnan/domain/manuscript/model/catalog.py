"""Catalog browsing: in-memory filtering and pagination over the full record set."""

import math
from enum import StrEnum

from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.value import ManuscriptSummary
from sampurnan.domain.shared.model.value import ValueObject

DEFAULT_PAGE_SIZE = 10


class SortKey(StrEnum):
    TITLE = "title"
    RECENT = "recent"


class CatalogFilter(ValueObject):
    """Free-text search intersected with optional category and language equality."""

    search: str = ""
    category: str | None = None
    language: str | None = None

    def matches(self, manuscript: Manuscript) -> bool:
        needle = self.search.strip().lower()
        if needle and not any(
            needle in value.lower()
            for value in (manuscript.title, manuscript.author, manuscript.inventory_code)
        ):
            return False
        if self.category and manuscript.category != self.category:
            return False
        if self.language and manuscript.language != self.language:
            return False
        return True


class CatalogPage(ValueObject):
    items: list[ManuscriptSummary]
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool
    empty: bool


def summarize(manuscript: Manuscript) -> ManuscriptSummary:
    return ManuscriptSummary(
        id=manuscript.id,
        title=manuscript.title,
        author=manuscript.author,
        inventory_code=manuscript.inventory_code,
        category=manuscript.category,
        language=manuscript.language,
        thumbnail_url=manuscript.thumbnail_url,
    )


class CatalogView:
    """Browsing state over an already-fetched, already-sorted record list.

    Changing the search text or a filter resets to page 1. Moving past either
    end is a no-op.
    """

    def __init__(self, records: list[Manuscript], page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._records = records
        self._page_size = page_size
        self._filter = CatalogFilter()
        self._page = 1

    @property
    def filter(self) -> CatalogFilter:
        return self._filter

    @property
    def page(self) -> int:
        return self._page

    @property
    def filtered(self) -> list[Manuscript]:
        return [m for m in self._records if self._filter.matches(m)]

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.filtered) / self._page_size)

    def set_search(self, text: str) -> None:
        self._refilter(search=text)

    def set_category(self, category: str | None) -> None:
        self._refilter(category=category or None)

    def set_language(self, language: str | None) -> None:
        self._refilter(language=language or None)

    def next_page(self) -> None:
        if self._page < self.total_pages:
            self._page += 1

    def previous_page(self) -> None:
        if self._page > 1:
            self._page -= 1

    def go_to(self, page: int) -> None:
        self._page = min(max(page, 1), max(self.total_pages, 1))

    def current(self) -> CatalogPage:
        matches = self.filtered
        total_pages = math.ceil(len(matches) / self._page_size)
        start = (self._page - 1) * self._page_size
        window = matches[start : start + self._page_size]
        return CatalogPage(
            items=[summarize(m) for m in window],
            page=self._page,
            page_size=self._page_size,
            total=len(matches),
            total_pages=total_pages,
            has_next=self._page < total_pages,
            has_previous=self._page > 1,
            empty=not matches,
        )

    def _refilter(self, **changes: str | None) -> None:
        self._filter = self._filter.model_copy(update=changes)
        self._page = 1
