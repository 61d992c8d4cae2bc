"""Public model exports for notionarchive."""

from __future__ import annotations

from .payload import ArchivePayload
from .records import DatabaseRef, NotionRecord, QueryPage
from .results import (
    DatabaseOutcome,
    DatabaseStatus,
    MutationOutcome,
    MutationStatus,
    TaskResult,
)

__all__ = [
    "ArchivePayload",
    "DatabaseRef",
    "NotionRecord",
    "QueryPage",
    "MutationStatus",
    "DatabaseStatus",
    "MutationOutcome",
    "DatabaseOutcome",
    "TaskResult",
]
