"""Public auth exports for notionarchive."""

from __future__ import annotations

from .auth_info import DEFAULT_NOTION_VERSION, AuthInfo
from .client_factory import DEFAULT_TIMEOUT_MS, NotionClientFactory

__all__ = ["AuthInfo", "NotionClientFactory", "DEFAULT_NOTION_VERSION", "DEFAULT_TIMEOUT_MS"]
