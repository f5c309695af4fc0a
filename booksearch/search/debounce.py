"""Trailing-edge debounce for search terms."""

from __future__ import annotations

import asyncio
from typing import Callable


class Debouncer:
    """Run ``callback(term)`` once input has been quiet for ``delay`` seconds.

    Every :meth:`schedule` call drops the pending invocation and restarts the
    timer, even when the term did not change. Must be used from inside a
    running event loop.
    """

    def __init__(self, callback: Callable[[str], None], delay: float) -> None:
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self._callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._pending_term: str | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def pending_term(self) -> str | None:
        return self._pending_term

    def schedule(self, term: str) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._pending_term = term
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_term = None

    def _fire(self) -> None:
        term = self._pending_term
        self._handle = None
        self._pending_term = None
        if term is not None:
            self._callback(term)


__all__ = ["Debouncer"]
