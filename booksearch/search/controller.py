"""Search controller coordinating debounced queries, paging and random picks."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Coroutine

from booksearch.config import BookSearchSettings, get_settings
from booksearch.domain.models import Book
from booksearch.i18n import I18nService
from booksearch.logging import logger
from booksearch.search.debounce import Debouncer
from booksearch.search.loading import LoadingGate
from booksearch.search.pagination import FIRST_PAGE, PageTracker
from booksearch.search.sequence import (
    LOAD_MORE_SLOT,
    RANDOM_SLOT,
    SEARCH_SLOT,
    RequestSequencer,
)
from booksearch.search.state import SearchState, create_search_state
from booksearch.services.catalog import CatalogClient
from booksearch.services.exceptions import CatalogServiceError

StateListener = Callable[[SearchState], None]


class SearchController:
    """Owns a :class:`SearchState` and drives it against the catalog.

    ``set_search_term`` is synchronous and only schedules work; the fetches
    it triggers run as background tasks on the current loop. ``load_more``
    and ``get_random_book`` are awaited by the caller. Catalog failures
    never escape: they are reported through ``error``.

    Each fetch holds a ticket for its slot and a response is applied only
    while that ticket is still the newest, so a slow reply for an older
    term cannot overwrite a newer one.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        *,
        state: SearchState,
        debounce_seconds: float,
        messages: I18nService | None = None,
        locale: str | None = None,
    ) -> None:
        self._catalog = catalog
        self._state = state
        self._pages = PageTracker(state.page_size)
        self._gate = LoadingGate()
        self._sequencer = RequestSequencer()
        self._debouncer = Debouncer(self._on_search_due, debounce_seconds)
        self._messages = messages or I18nService()
        self._locale = locale
        self._tasks: set[asyncio.Task[None]] = set()
        self._listeners: list[StateListener] = []

    async def __aenter__(self) -> SearchController:
        self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def state(self) -> SearchState:
        snapshot = self._state.snapshot()
        snapshot.busy = self._gate.is_busy
        return snapshot

    @property
    def term(self) -> str:
        return self._state.term

    @property
    def page(self) -> int:
        return self._state.page

    @property
    def page_size(self) -> int:
        return self._state.page_size

    @property
    def items(self) -> tuple[Book, ...]:
        return tuple(self._state.items)

    @property
    def has_more(self) -> bool:
        return self._state.has_more

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def is_loading(self) -> bool:
        return self._gate.is_busy

    @property
    def is_search_pending(self) -> bool:
        return self._debouncer.pending

    @property
    def selected(self) -> Book | None:
        return self._state.selected

    @selected.setter
    def selected(self, book: Book | None) -> None:
        self._state.selected = book
        self._notify()

    def clear_selection(self) -> None:
        self.selected = None

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with a fresh snapshot after every change."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        """Apply the initial term the way a freshly mounted view would."""

        self.set_search_term(self._state.term)

    def set_search_term(self, term: str) -> None:
        self._state.term = term
        self._reset_page()
        if term:
            self._debouncer.schedule(term)
        else:
            # An empty box lists everything right away.
            self._debouncer.cancel()
            self._spawn(self._search(""))
        self._notify()

    async def load_more(self) -> bool:
        """Fetch and append the next page; return False when skipped."""

        if self._gate.is_busy or not self._state.has_more or self._debouncer.pending:
            return False

        term = self._state.term
        page = self._pages.advance()
        self._state.page = page
        ticket = self._sequencer.issue(LOAD_MORE_SLOT)
        await self._gate.run(lambda: self._fetch_page(term, page, LOAD_MORE_SLOT, ticket))
        self._notify()
        return True

    async def get_random_book(self) -> Book | None:
        ticket = self._sequencer.issue(RANDOM_SLOT)
        self._state.error = None
        self._notify()
        try:
            book = await self._gate.run(self._catalog.fetch_random)
        except CatalogServiceError as exc:
            if self._sequencer.is_current(RANDOM_SLOT, ticket):
                logger.warning("random_book_failed", error=str(exc))
                self._state.error = self._message("errors.fetch_random")
            else:
                logger.info("random_response_discarded", ticket=ticket)
            self._notify()
            return None

        if not self._sequencer.is_current(RANDOM_SLOT, ticket):
            logger.info("random_response_discarded", ticket=ticket)
            self._notify()
            return None
        self._state.selected = book
        self._notify()
        return book

    async def wait_idle(self) -> None:
        """Wait for every background fetch spawned so far."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        self._debouncer.cancel()
        await self.wait_idle()
        self._listeners.clear()

    def _on_search_due(self, term: str) -> None:
        logger.debug("search_debounce_fired", term=term)
        self._spawn(self._search(term))

    async def _search(self, term: str) -> None:
        self._reset_page()
        ticket = self._sequencer.issue(SEARCH_SLOT)
        # Pages appended for the previous term must not land on the new list.
        self._sequencer.invalidate(LOAD_MORE_SLOT)
        await self._gate.run(lambda: self._fetch_page(term, FIRST_PAGE, SEARCH_SLOT, ticket))
        self._notify()

    async def _fetch_page(self, term: str, page: int, slot: str, ticket: int) -> None:
        self._state.error = None
        self._notify()
        try:
            books = await self._catalog.fetch_page(term, page, self._pages.page_size)
        except CatalogServiceError as exc:
            if not self._sequencer.is_current(slot, ticket):
                logger.info("search_response_discarded", slot=slot, term=term, page=page)
                return
            logger.warning("search_fetch_failed", term=term, page=page, error=str(exc))
            self._state.error = self._message("errors.fetch_books")
            if slot == LOAD_MORE_SLOT:
                # Calling load_more again retries the page that failed.
                self._state.page = self._pages.rewind()
            return

        if not self._sequencer.is_current(slot, ticket):
            logger.info("search_response_discarded", slot=slot, term=term, page=page)
            return

        if page == FIRST_PAGE:
            self._state.items = list(books)
        else:
            self._state.items = [*self._state.items, *books]
        self._state.has_more = len(books) == self._pages.page_size
        logger.debug(
            "search_page_applied",
            term=term,
            page=page,
            received=len(books),
            total=len(self._state.items),
        )

    def _reset_page(self) -> None:
        self._pages.reset()
        self._state.page = self._pages.current_page

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("search_task_failed", error=repr(exc))

    def _message(self, key: str) -> str:
        return self._messages.gettext(key, locale=self._locale)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("search_listener_failed")


def create_search_controller(
    catalog: CatalogClient,
    *,
    initial_term: str = "",
    settings: BookSearchSettings | None = None,
    messages: I18nService | None = None,
) -> SearchController:
    settings = settings or get_settings()
    state = create_search_state(initial_term, page_size=settings.search.page_size)
    return SearchController(
        catalog,
        state=state,
        debounce_seconds=settings.search.debounce_seconds,
        messages=messages,
        locale=settings.locale,
    )


__all__ = ["SearchController", "StateListener", "create_search_controller"]
