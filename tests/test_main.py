"""Tests for logging configuration and the console driver."""

from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from booksearch.domain.models import Book
from booksearch.logging import configure_logging
from booksearch.main import handle_line, log_state
from booksearch.search.state import create_search_state


def test_configure_logging_outputs_json(capsys):
    configure_logging(logging.INFO)
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_log_state_reports_selection():
    state = create_search_state("atlas", page_size=20)
    state.selected = Book(id=1, title="Atlas Shrugged")

    with capture_logs() as logs:
        log_state(state)

    assert logs[0]["event"] == "search_state"
    assert logs[0]["term"] == "atlas"
    assert logs[0]["selected"] == "Atlas Shrugged"


class DummyController:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def set_search_term(self, term: str) -> None:
        self.calls.append(("term", term))

    async def load_more(self) -> bool:
        self.calls.append(("more",))
        return True

    async def get_random_book(self):
        self.calls.append(("random",))
        return None

    def clear_selection(self) -> None:
        self.calls.append(("clear",))


@pytest.mark.asyncio
async def test_handle_line_dispatches_commands():
    controller = DummyController()

    assert await handle_line(controller, "atlas\n") is True
    assert await handle_line(controller, ":more\n") is True
    assert await handle_line(controller, ":random\n") is True
    assert await handle_line(controller, ":clear\n") is True
    assert await handle_line(controller, "\n") is True
    assert await handle_line(controller, ":quit\n") is False

    assert controller.calls == [
        ("term", "atlas"),
        ("more",),
        ("random",),
        ("clear",),
        ("term", ""),
    ]
