"""HTTP client for the book catalog endpoints."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from booksearch.config import CatalogSettings
from booksearch.domain.models import Book
from booksearch.logging import logger
from booksearch.services.exceptions import CatalogServiceError

_BOOK_LIST = TypeAdapter(list[Book])


class CatalogClient:
    """Consumes the paginated list endpoint and the random pick endpoint.

    Transport failures, non-success statuses and malformed bodies all
    surface as :class:`CatalogServiceError`.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: CatalogSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or CatalogSettings()

    async def fetch_page(self, term: str, page: int, page_size: int) -> list[Book]:
        params = {"search": term, "page": page, "pageSize": page_size}
        data = await self._get_json(
            "catalog_page_request",
            self._settings.url_for(self._settings.books_path),
            params=params,
        )

        field = self._settings.items_field
        if not isinstance(data, dict) or field not in data:
            raise CatalogServiceError(f"Catalog response is missing '{field}'.")
        try:
            return _BOOK_LIST.validate_python(data[field])
        except ValidationError as exc:
            raise CatalogServiceError(f"Catalog returned malformed items: {exc}") from exc

    async def fetch_random(self) -> Book:
        data = await self._get_json(
            "catalog_random_request",
            self._settings.url_for(self._settings.random_path),
        )
        try:
            return Book.model_validate(data)
        except ValidationError as exc:
            raise CatalogServiceError(f"Catalog returned a malformed book: {exc}") from exc

    async def _get_json(
        self,
        name: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        try:
            response = await self._client.get(
                url,
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            logger.warning("catalog_request_failed", operation=name, status_code=status_code)
            raise CatalogServiceError(f"Catalog request failed ({status_code}).") from exc
        except httpx.RequestError as exc:
            logger.warning("catalog_request_failed", operation=name, error=str(exc))
            raise CatalogServiceError(f"Catalog request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("catalog_response_unparseable", operation=name)
            raise CatalogServiceError("Catalog response is not valid JSON.") from exc


__all__ = ["CatalogClient"]
