"""Internal controller exports for notionarchive."""

from __future__ import annotations

from .notion_controller import NotionController
from .retry import RetryPolicy

__all__ = ["NotionController", "RetryPolicy"]
