"""notionarchive public API."""

from __future__ import annotations

from notionarchive.auth import AuthInfo, NotionClientFactory
from notionarchive.config import TaskSettings, get_task_settings
from notionarchive.controller import NotionController, RetryPolicy
from notionarchive.databases import NOTION_DATABASES, resolve_databases
from notionarchive.errors import (
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
)
from notionarchive.invoker import InvocationResponse, invoke
from notionarchive.models import (
    ArchivePayload,
    DatabaseOutcome,
    DatabaseRef,
    MutationOutcome,
    NotionRecord,
    QueryPage,
    TaskResult,
)
from notionarchive.task import ArchiveTask, ResultAggregator

__all__ = [
    # High-level
    "ArchiveTask",
    "ResultAggregator",
    "invoke",
    "InvocationResponse",
    "NOTION_DATABASES",
    "resolve_databases",
    # Config / Auth
    "TaskSettings",
    "get_task_settings",
    "AuthInfo",
    "NotionClientFactory",
    "NotionController",
    "RetryPolicy",
    # Models
    "ArchivePayload",
    "DatabaseRef",
    "NotionRecord",
    "QueryPage",
    "MutationOutcome",
    "DatabaseOutcome",
    "TaskResult",
    # Errors
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
]
