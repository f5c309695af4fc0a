"""Busy flag wrapped around awaited operations."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, TypeVar

R = TypeVar("R")


class LoadingGate:
    """Marks the owner busy while wrapped operations run.

    Overlapping operations are counted so the flag only drops once the last
    of them has finished. Release happens on every exit path, including
    exceptions and cancellation.
    """

    def __init__(self) -> None:
        self._active = 0

    @property
    def is_busy(self) -> bool:
        return self._active > 0

    @asynccontextmanager
    async def hold(self) -> AsyncIterator[None]:
        self._active += 1
        try:
            yield
        finally:
            self._active -= 1

    async def run(self, operation: Callable[[], Awaitable[R]]) -> R:
        async with self.hold():
            return await operation()


__all__ = ["LoadingGate"]
