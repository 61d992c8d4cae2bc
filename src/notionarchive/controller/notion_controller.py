"""Notion API controller (internal use only)."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterator, Optional, TypeVar

import httpx
from notion_client.errors import HTTPResponseError, RequestTimeoutError

from notionarchive.auth import DEFAULT_TIMEOUT_MS, AuthInfo, NotionClientFactory
from notionarchive.errors import (
    ApiError,
    ApiErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotionArchiveError,
    RetryExhaustedError,
    map_api_error,
    parse_retry_after,
)
from notionarchive.models import NotionRecord, QueryPage

from .endpoints import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    build_archive_body,
    build_query_body,
    database_query_path,
    page_path,
)
from .retry import RetryPolicy

T = TypeVar("T")

log = logging.getLogger(__name__)

# The SDK logs through this logger instead of its own console handler.
sdk_log = logging.getLogger("notionarchive.sdk")


class NotionController:
    """
    Notion API controller (internal only).

    Notes:
        - The SDK client object is NOT exposed.
        - Every call goes through the same rate-limit retry policy, and every
          SDK exception surfaces as a NotionArchiveError.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self._retry_policy = retry_policy or RetryPolicy()
        self._page_size = _check_page_size(page_size)
        self._client = NotionClientFactory(auth_info).build_client(
            timeout_ms=timeout_ms,
            logger=sdk_log,
        )

    @classmethod
    def from_client(
        cls,
        client: Any,
        *,
        retry_policy: Optional[RetryPolicy] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> "NotionController":
        """Create controller from a pre-built SDK client (useful for tests)."""
        obj = cls.__new__(cls)
        obj._retry_policy = retry_policy or RetryPolicy()
        obj._page_size = _check_page_size(page_size)
        obj._client = client
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def query_page(
        self,
        database_id: str,
        cursor: Optional[str] = None,
        filter: Optional[dict[str, Any]] = None,
    ) -> QueryPage:
        """Fetch one page of query results for a database."""
        body = build_query_body(cursor, filter, self._page_size)
        data = self._execute(
            lambda: self._client.request(
                path=database_query_path(database_id),
                method="POST",
                body=body,
            ),
            operation=f"query database {database_id}",
        )
        return _query_response_to_page(data)

    def iter_pages(
        self,
        database_id: str,
        filter: Optional[dict[str, Any]] = None,
    ) -> Iterator[QueryPage]:
        """
        Lazily yield every result page of a database query, in API order.

        Pages are requested one at a time, only when the previous one has been
        consumed. Errors propagate to the consumer and end the iteration.
        """
        cursor: Optional[str] = None
        while True:
            page = self.query_page(database_id, cursor, filter)
            yield page

            if not page.has_more:
                return
            if not page.next_cursor:
                log.warning(
                    "Database %s reported more results without a cursor; stopping",
                    database_id,
                )
                return
            cursor = page.next_cursor

    def archive_page(self, page_id: str, *, archive_instead: bool = True) -> None:
        """Archive a page; with archive_instead, also move it to the trash."""
        body = build_archive_body(archive_instead=archive_instead)
        self._execute(
            lambda: self._client.request(
                path=page_path(page_id),
                method="PATCH",
                body=body,
            ),
            operation=f"archive page {page_id}",
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T], *, operation: str) -> T:
        policy = self._retry_policy
        last_error: Optional[NotionArchiveError] = None

        for attempt in range(1, policy.max_attempts + 1):
            try:
                return func()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if not policy.should_retry(mapped):
                    if mapped is exc:
                        raise
                    raise mapped from exc

                last_error = mapped
                if attempt == policy.max_attempts:
                    break

                delay = policy.backoff(mapped)
                log.warning(
                    "Rate limited on %s (attempt %d/%d); retrying in %.2fs",
                    operation,
                    attempt,
                    policy.max_attempts,
                    delay,
                )
                time.sleep(delay)

        raise RetryExhaustedError(
            f"Rate limited on {operation} after {policy.max_attempts} attempts",
            details={"operation": operation, "attempts": policy.max_attempts},
            cause=last_error,
        ) from last_error

    def _map_exception(self, exc: Exception) -> NotionArchiveError:
        if isinstance(exc, NotionArchiveError):
            return exc

        if isinstance(exc, HTTPResponseError):
            return map_api_error(_http_response_error_to_info(exc), cause=exc)

        if isinstance(exc, (RequestTimeoutError, httpx.TransportError, OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Notion API error", cause=exc)


def _check_page_size(page_size: int) -> int:
    if not isinstance(page_size, int) or not 1 <= page_size <= MAX_PAGE_SIZE:
        raise InvalidArgumentError(
            f"page_size must be between 1 and {MAX_PAGE_SIZE}",
            details={"page_size": page_size},
        )
    return page_size


def _query_response_to_page(data: Any) -> QueryPage:
    if not isinstance(data, dict):
        raise ApiError("Unexpected query response", details={"type": type(data).__name__})

    records: list[NotionRecord] = []
    for item in data.get("results") or []:
        if not isinstance(item, dict) or not isinstance(item.get("id"), str):
            raise ApiError("Query result without an id", details={"item": item})
        records.append(NotionRecord(id=item["id"], data=item))

    next_cursor = data.get("next_cursor")
    return QueryPage(
        records=records,
        has_more=bool(data.get("has_more", False)),
        next_cursor=next_cursor if isinstance(next_cursor, str) else None,
    )


def _http_response_error_to_info(exc: HTTPResponseError) -> ApiErrorInfo:
    status_code = getattr(exc, "status", None)

    code = getattr(exc, "code", None)
    # APIErrorCode is a str Enum; compare on its value.
    code = getattr(code, "value", code)

    headers = getattr(exc, "headers", None)
    retry_after = None
    if headers is not None:
        retry_after = parse_retry_after(headers.get("retry-after"))

    message = str(exc) or None

    if not isinstance(status_code, int):
        status_code = 0

    return ApiErrorInfo(
        status_code=status_code,
        code=code if isinstance(code, str) else None,
        message=message,
        retry_after=retry_after,
    )

