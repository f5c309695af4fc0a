"""Runtime configuration based on environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="http://localhost:3000",
        description="Origin of the book catalog API.",
    )
    books_path: str = Field(default="/api/books", min_length=1)
    random_path: str = Field(default="/api/books/random", min_length=1)
    items_field: str = Field(
        default="books",
        min_length=1,
        description="Key of the item list in paginated responses.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    @field_validator("books_path", "random_path")
    @classmethod
    def _ensure_leading_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith("/") else f"/{value}"

    def url_for(self, path: str) -> str:
        return f"{str(self.base_url).rstrip('/')}{path}"


class SearchSettings(BaseModel):
    page_size: int = Field(default=20, ge=1, le=500)
    debounce_seconds: float = Field(
        default=0.3,
        ge=0,
        description="Quiet period before a typed search term is sent.",
    )


class BookSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOOKSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    locale: str = "en"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache
def get_settings() -> BookSearchSettings:
    """Return cached settings instance."""

    return BookSearchSettings()


__all__ = [
    "BookSearchSettings",
    "CatalogSettings",
    "SearchSettings",
    "get_settings",
]
