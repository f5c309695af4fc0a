"""Explicit state owned by one search controller."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from booksearch.domain.models import Book
from booksearch.search.pagination import FIRST_PAGE


@dataclass(slots=True)
class SearchState:
    term: str
    page_size: int
    page: int = FIRST_PAGE
    items: list[Book] = field(default_factory=list)
    has_more: bool = True
    error: str | None = None
    selected: Book | None = None
    busy: bool = False

    def snapshot(self) -> SearchState:
        """Return a copy whose item list is detached from this state."""

        return replace(self, items=list(self.items))


def create_search_state(initial_term: str = "", *, page_size: int) -> SearchState:
    return SearchState(term=initial_term, page_size=page_size)


__all__ = ["SearchState", "create_search_state"]
