"""Console entrypoint driving a search controller from stdin."""

from __future__ import annotations

import asyncio
import sys

import httpx

from booksearch.config import get_settings
from booksearch.logging import configure_logging, logger
from booksearch.search import SearchController, SearchState, create_search_controller
from booksearch.services.catalog import CatalogClient


def log_state(state: SearchState) -> None:
    logger.info(
        "search_state",
        term=state.term,
        page=state.page,
        items=len(state.items),
        has_more=state.has_more,
        busy=state.busy,
        error=state.error,
        selected=state.selected.title if state.selected else None,
    )


async def handle_line(controller: SearchController, line: str) -> bool:
    """Apply one input line; return False once the user asked to quit."""

    command = line.strip()
    if command == ":quit":
        return False
    if command == ":more":
        await controller.load_more()
    elif command == ":random":
        await controller.get_random_book()
    elif command == ":clear":
        controller.clear_selection()
    else:
        controller.set_search_term(command)
    return True


async def main(initial_term: str = "") -> None:
    settings = get_settings()
    configure_logging(settings.logging_level)

    async with httpx.AsyncClient() as http_client:
        catalog = CatalogClient(http_client, settings=settings.catalog)
        controller = create_search_controller(
            catalog, initial_term=initial_term, settings=settings
        )
        controller.subscribe(log_state)
        logger.info("booksearch_starting", base_url=str(settings.catalog.base_url))
        async with controller:
            while True:
                line = await asyncio.to_thread(sys.stdin.readline)
                if not line:
                    break
                if not await handle_line(controller, line):
                    break


def run() -> None:
    asyncio.run(main(" ".join(sys.argv[1:])))


if __name__ == "__main__":
    run()
