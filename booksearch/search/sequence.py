"""Per-slot request tickets used to drop stale responses."""

from __future__ import annotations

from collections import defaultdict

SEARCH_SLOT = "search"
LOAD_MORE_SLOT = "load_more"
RANDOM_SLOT = "random"


class RequestSequencer:
    def __init__(self) -> None:
        self._issued: defaultdict[str, int] = defaultdict(int)

    def issue(self, slot: str) -> int:
        self._issued[slot] += 1
        return self._issued[slot]

    def invalidate(self, slot: str) -> None:
        """Make every outstanding ticket for ``slot`` stale."""

        self._issued[slot] += 1

    def is_current(self, slot: str, ticket: int) -> bool:
        return self._issued[slot] == ticket


__all__ = ["LOAD_MORE_SLOT", "RANDOM_SLOT", "SEARCH_SLOT", "RequestSequencer"]
