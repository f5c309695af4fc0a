"""Shared fixtures: an in-memory catalog served through httpx.MockTransport."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest_asyncio

from booksearch.config import BookSearchSettings, CatalogSettings, SearchSettings
from booksearch.services.catalog import CatalogClient

BASE_URL = "http://catalog.test"


def make_books(prefix: str, count: int, start: int = 0) -> list[dict[str, Any]]:
    return [{"id": f"{prefix}-{i}", "title": f"{prefix} {i}"} for i in range(start, start + count)]


class FakeCatalog:
    """Scripted catalog: responses keyed by (term, page) plus a random pick.

    A response is either a list of book dicts, an ``int`` status code, or an
    ``httpx.Response``. Setting ``hold[(term, page)]`` to an Event parks that
    request until the event is set.
    """

    def __init__(self) -> None:
        self.pages: dict[tuple[str, int], Any] = {}
        self.random: Any = {"id": "random-1", "title": "Random"}
        self.hold: dict[tuple[str, int] | str, asyncio.Event] = {}
        self.requests: list[httpx.Request] = []

    @property
    def page_requests(self) -> list[tuple[str, int, int]]:
        return [
            (
                request.url.params["search"],
                int(request.url.params["page"]),
                int(request.url.params["pageSize"]),
            )
            for request in self.requests
            if request.url.path == "/api/books"
        ]

    @property
    def random_requests(self) -> int:
        return sum(1 for request in self.requests if request.url.path == "/api/books/random")

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/books/random":
            key: Any = "random"
            payload = self.random
        else:
            key = (request.url.params["search"], int(request.url.params["page"]))
            payload = self.pages.get(key, [])
        event = self.hold.get(key)
        if event is not None:
            await event.wait()

        if isinstance(payload, httpx.Response):
            return payload
        if isinstance(payload, int):
            return httpx.Response(payload, json={"detail": "error"})
        if isinstance(payload, list):
            return httpx.Response(200, json={"books": payload})
        return httpx.Response(200, json=payload)


def make_settings(page_size: int = 3, debounce_seconds: float = 0.01) -> BookSearchSettings:
    return BookSearchSettings(
        catalog=CatalogSettings(base_url=BASE_URL),
        search=SearchSettings(page_size=page_size, debounce_seconds=debounce_seconds),
    )


@pytest_asyncio.fixture
async def fake_catalog():
    return FakeCatalog()


@pytest_asyncio.fixture
async def catalog_client(fake_catalog):
    transport = httpx.MockTransport(fake_catalog.handler)
    async with httpx.AsyncClient(transport=transport) as client:
        yield CatalogClient(client, settings=CatalogSettings(base_url=BASE_URL))
