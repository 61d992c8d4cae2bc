"""Task settings and their environment overrides."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from notionarchive.auth import DEFAULT_TIMEOUT_MS
from notionarchive.controller.endpoints import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from notionarchive.controller.retry import (
    DEFAULT_FALLBACK_DELAY_SEC,
    DEFAULT_MAX_ATTEMPTS,
    RetryPolicy,
)
from notionarchive.databases import NOTION_DATABASES
from notionarchive.errors import ConfigurationError
from notionarchive.util.ids import is_notion_id, normalize_notion_id

from .env import optional_env, optional_env_as

DEFAULT_PACING_DELAY_SEC: float = 0.35
DEFAULT_ERROR_LIMIT: int = 1000

TOKEN_ENV = "NOTION_TOKEN"
PACING_ENV = "NOTION_ARCHIVE_PACING_SECONDS"
FALLBACK_ENV = "NOTION_ARCHIVE_RETRY_FALLBACK_SECONDS"
MAX_ATTEMPTS_ENV = "NOTION_ARCHIVE_MAX_ATTEMPTS"
PAGE_SIZE_ENV = "NOTION_ARCHIVE_PAGE_SIZE"
ERROR_LIMIT_ENV = "NOTION_ARCHIVE_ERROR_LIMIT"
TIMEOUT_ENV = "NOTION_ARCHIVE_TIMEOUT_MS"
DATABASES_ENV = "NOTION_ARCHIVE_DATABASES"


@dataclass(frozen=True)
class TaskSettings:
    """Tunables of one archive task; defaults match the Notion rate limit."""

    pacing_delay_sec: float = DEFAULT_PACING_DELAY_SEC
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    page_size: int = DEFAULT_PAGE_SIZE
    error_limit: int = DEFAULT_ERROR_LIMIT
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not math.isfinite(self.pacing_delay_sec) or self.pacing_delay_sec < 0:
            raise ValueError("pacing_delay_sec must be a finite number >= 0")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")
        if self.error_limit < 0:
            raise ValueError("error_limit must be >= 0")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")


def get_task_settings() -> TaskSettings:
    """Build TaskSettings from optional NOTION_ARCHIVE_* environment overrides."""
    try:
        return TaskSettings(
            pacing_delay_sec=optional_env_as(PACING_ENV, float, DEFAULT_PACING_DELAY_SEC),
            retry=RetryPolicy(
                max_attempts=optional_env_as(MAX_ATTEMPTS_ENV, int, DEFAULT_MAX_ATTEMPTS),
                fallback_delay_sec=optional_env_as(
                    FALLBACK_ENV, float, DEFAULT_FALLBACK_DELAY_SEC
                ),
            ),
            page_size=optional_env_as(PAGE_SIZE_ENV, int, DEFAULT_PAGE_SIZE),
            error_limit=optional_env_as(ERROR_LIMIT_ENV, int, DEFAULT_ERROR_LIMIT),
            timeout_ms=optional_env_as(TIMEOUT_ENV, int, DEFAULT_TIMEOUT_MS),
        )
    except ValueError as exc:
        raise ConfigurationError(f"Invalid task settings: {exc}", cause=exc) from exc


def get_default_token() -> Optional[str]:
    """Process-wide fallback token for payloads that omit one."""
    return optional_env(TOKEN_ENV)


def get_database_table() -> dict[str, str]:
    """Database table from NOTION_ARCHIVE_DATABASES, else the built-in table."""
    raw = optional_env(DATABASES_ENV)
    if raw is None:
        return dict(NOTION_DATABASES)
    return parse_database_table(raw)


def parse_database_table(raw: str) -> dict[str, str]:
    """
    Parse `NAME=id,NAME=id` into an ordered name -> canonical id table.

    Raises:
        ConfigurationError: on malformed entries, duplicate names or ids that
            are not Notion ids.
    """
    table: dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, db_id = entry.partition("=")
        name, db_id = name.strip(), db_id.strip()
        if not sep or not name or not db_id:
            raise ConfigurationError(
                f"Malformed {DATABASES_ENV} entry: {entry!r}",
                details={"entry": entry},
            )
        if name in table:
            raise ConfigurationError(
                f"Duplicate database name in {DATABASES_ENV}: {name}",
                details={"name": name},
            )
        if not is_notion_id(db_id):
            raise ConfigurationError(
                f"Invalid Notion database id for {name}: {db_id!r}",
                details={"name": name, "id": db_id},
            )
        table[name] = normalize_notion_id(db_id)

    if not table:
        raise ConfigurationError(f"{DATABASES_ENV} is set but lists no databases")
    return table
