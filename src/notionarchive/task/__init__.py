"""Archive task exports for notionarchive."""

from __future__ import annotations

from .aggregator import ResultAggregator
from .archive_task import ArchiveTask

__all__ = ["ArchiveTask", "ResultAggregator"]
