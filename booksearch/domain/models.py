"""Pydantic models for catalog payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """One catalog entry.

    Only identity matters to the search layer, so any JSON object is
    accepted: authors may be nested objects or lists, ids may be numbers,
    and whatever else the server sends is kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    title: Any = None
    author: Any = None


__all__ = ["Book"]
