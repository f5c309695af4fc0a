"""Page counter for incremental loading."""

from __future__ import annotations

FIRST_PAGE = 1


class PageTracker:
    def __init__(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self._page = FIRST_PAGE

    @property
    def current_page(self) -> int:
        return self._page

    def advance(self) -> int:
        self._page += 1
        return self._page

    def rewind(self) -> int:
        """Step back one page, never below the first."""

        self._page = max(FIRST_PAGE, self._page - 1)
        return self._page

    def reset(self) -> None:
        self._page = FIRST_PAGE


__all__ = ["FIRST_PAGE", "PageTracker"]
