"""Data model for Notion databases, pages and query responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(slots=True, frozen=True)
class DatabaseRef:
    """A database known to the task: logical name plus Notion database id."""

    name: str
    id: str


@dataclass(slots=True)
class NotionRecord:
    """
    A page returned by a database query.

    Only `id` is read by the task; `data` is the raw page object as returned
    by the API.
    """

    id: str
    data: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(slots=True)
class QueryPage:
    """One response of a database query."""

    records: list[NotionRecord]
    has_more: bool = False
    next_cursor: Optional[str] = None
