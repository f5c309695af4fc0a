"""Search orchestration: paging, debouncing and the loading gate."""

from booksearch.search.controller import SearchController, create_search_controller
from booksearch.search.debounce import Debouncer
from booksearch.search.loading import LoadingGate
from booksearch.search.pagination import PageTracker
from booksearch.search.sequence import RequestSequencer
from booksearch.search.state import SearchState, create_search_state

__all__ = [
    "Debouncer",
    "LoadingGate",
    "PageTracker",
    "RequestSequencer",
    "SearchController",
    "SearchState",
    "create_search_controller",
    "create_search_state",
]
