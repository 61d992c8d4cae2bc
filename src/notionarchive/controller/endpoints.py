"""Request paths and bodies for the Notion endpoints used by the task."""

from __future__ import annotations

from typing import Any, Optional

DEFAULT_PAGE_SIZE: int = 100
MAX_PAGE_SIZE: int = 100


def database_query_path(database_id: str) -> str:
    return f"databases/{database_id}/query"


def page_path(page_id: str) -> str:
    return f"pages/{page_id}"


def build_query_body(
    cursor: Optional[str],
    filter: Optional[dict[str, Any]],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> dict[str, Any]:
    """Body for POST databases/{id}/query. Absent values are omitted, not null."""
    body: dict[str, Any] = {"page_size": page_size}
    if cursor is not None:
        body["start_cursor"] = cursor
    if filter is not None:
        body["filter"] = filter
    return body


def build_archive_body(*, archive_instead: bool) -> dict[str, Any]:
    """
    Body for PATCH pages/{id}.

    `archived` is always set; `in_trash` additionally moves the page to the
    workspace trash. Neither is permanent.
    """
    body: dict[str, Any] = {"archived": True}
    if archive_instead:
        body["in_trash"] = True
    return body
