"""Public error exports for notionarchive."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    ApiErrorInfo,
    AuthError,
    ConfigurationError,
    ConflictError,
    InvalidArgumentError,
    InvalidPayloadError,
    MissingConfigurationError,
    NetworkError,
    NotFoundError,
    NotionArchiveError,
    PermissionError,
    RateLimitError,
    RetryExhaustedError,
    UnknownDatabaseError,
    map_api_error,
    parse_retry_after,
)

__all__ = [
    "NotionArchiveError",
    "ConfigurationError",
    "MissingConfigurationError",
    "UnknownDatabaseError",
    "InvalidPayloadError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "RetryExhaustedError",
    "NetworkError",
    "ApiError",
    "ApiErrorInfo",
    "map_api_error",
    "parse_retry_after",
]
