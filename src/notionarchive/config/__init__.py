"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env, optional_env_as, require_env_vars
from .settings import (
    DEFAULT_ERROR_LIMIT,
    DEFAULT_PACING_DELAY_SEC,
    TaskSettings,
    get_database_table,
    get_default_token,
    get_task_settings,
    parse_database_table,
)

__all__ = [
    "DEFAULT_ERROR_LIMIT",
    "DEFAULT_PACING_DELAY_SEC",
    "TaskSettings",
    "get_database_table",
    "get_default_token",
    "get_task_settings",
    "optional_env",
    "optional_env_as",
    "parse_database_table",
    "require_env_vars",
]
