"""Exception hierarchy and Notion API error mapping for notionarchive."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional


class NotionArchiveError(Exception):
    """
    Base exception for notionarchive.

    Attributes:
        details: Optional structured information (e.g., HTTP status, Notion code).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigurationError(NotionArchiveError):
    """Raised before any remote call when the task cannot be configured."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class UnknownDatabaseError(ConfigurationError):
    """Raised when a requested database name is not in the database table."""


class InvalidPayloadError(ConfigurationError):
    """Raised when a task payload is malformed."""


class AuthError(NotionArchiveError):
    """Raised when the integration token is rejected (HTTP 401)."""


class PermissionError(NotionArchiveError):
    """Raised when the integration lacks access to a resource (HTTP 403)."""


class InvalidArgumentError(NotionArchiveError):
    """Raised when request arguments are invalid (HTTP 400, validation_error)."""


class NotFoundError(NotionArchiveError):
    """Raised when a database or page is not found or not shared (HTTP 404)."""


class ConflictError(NotionArchiveError):
    """Raised when a transaction conflicts with another write (HTTP 409)."""


class RateLimitError(NotionArchiveError):
    """Raised when rate-limited (HTTP 429, code rate_limited)."""

    @property
    def retry_after(self) -> Optional[float]:
        """Server-supplied backoff hint in seconds, if any."""
        value = self.details.get("retry_after")
        return value if isinstance(value, (int, float)) else None


class RetryExhaustedError(NotionArchiveError):
    """Raised when an operation stays rate-limited for every allowed attempt."""


class NetworkError(NotionArchiveError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(NotionArchiveError):
    """Raised for unclassified API errors (5xx, unknown codes, etc.)."""


@dataclass(frozen=True)
class ApiErrorInfo:
    """Lightweight Notion error information for mapping to notionarchive exceptions."""

    status_code: int
    code: str | None = None
    message: str | None = None
    retry_after: float | None = None


_CODE_STATUS: dict[str, int] = {
    "invalid_json": 400,
    "invalid_request_url": 400,
    "invalid_request": 400,
    "validation_error": 400,
    "missing_version": 400,
    "unauthorized": 401,
    "restricted_resource": 403,
    "object_not_found": 404,
    "conflict_error": 409,
    "rate_limited": 429,
    "internal_server_error": 500,
    "service_unavailable": 503,
    "database_connection_unavailable": 503,
    "gateway_timeout": 504,
}


def parse_retry_after(value: Any) -> Optional[float]:
    """
    Parse a Retry-After header value (delta seconds).

    Returns None for missing, non-numeric or negative values; HTTP-date
    forms are not used by Notion and are treated as missing.
    """
    if value is None:
        return None
    try:
        seconds = float(str(value).strip())
    except ValueError:
        return None
    if seconds < 0 or not math.isfinite(seconds):
        return None
    return seconds


def map_api_error(
    info: ApiErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> NotionArchiveError:
    """
    Map a Notion API error to a notionarchive exception.

    The Notion error code wins over the HTTP status when both are present:
        - 400 / invalid_* / validation_error -> InvalidArgumentError
        - 401 / unauthorized -> AuthError
        - 403 / restricted_resource -> PermissionError
        - 404 / object_not_found -> NotFoundError
        - 409 / conflict_error -> ConflictError
        - 429 / rate_limited -> RateLimitError
        - otherwise -> ApiError
    """
    status = _CODE_STATUS.get(info.code or "", info.status_code)

    details: dict[str, Any] = {
        "status_code": info.status_code,
        "code": info.code,
    }
    if info.retry_after is not None:
        details["retry_after"] = info.retry_after

    message = info.message or f"HTTP error {info.status_code}"

    if status == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if status == 401:
        return AuthError(message, details=details, cause=cause)
    if status == 403:
        return PermissionError(message, details=details, cause=cause)
    if status == 404:
        return NotFoundError(message, details=details, cause=cause)
    if status == 409:
        return ConflictError(message, details=details, cause=cause)
    if status == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
